"""Duty Attendance package.

Feature modules (floors, students, teachers, duty, attendance, reports, ...)
each keep a domain model, a repository interface with its MySQL implementation,
a service layer and a thin Flask controller.
"""

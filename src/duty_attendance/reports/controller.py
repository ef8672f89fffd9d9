from __future__ import annotations

from flask import Flask, Response

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/duty-sessions/<int:session_id>/report", methods=["GET"], endpoint="download_report")
    @login_required
    def download_report(session_id: int):
        report = container.report_service.build_report(session_id)
        return Response(
            report.text,
            mimetype="text/plain",
            headers={"Content-Disposition": f'attachment; filename="{report.filename}"'},
        )

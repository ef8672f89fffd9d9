from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from ..common.validators import coerce_enum, require_enum
from ..core.enums import Floor, Grade, Section
from ..core.exceptions import InvalidClassError, ValidationError
from .model import CLASS_CATALOGUE, DEFAULT_FLOOR_LAYOUT, ClassIdentifier

ClassPredicate = Callable[[object, object], bool]


def to_class_identifier(grade, section) -> ClassIdentifier:
    """Coerce raw grade/section values (int or str) into a ClassIdentifier.

    Raises InvalidClassError when either value is outside the catalogue.
    """

    try:
        class_id = ClassIdentifier(coerce_enum(Grade, grade), coerce_enum(Section, section))
    except ValueError:
        raise InvalidClassError(f"Unknown class: grade={grade!r} section={section!r}") from None

    if class_id not in CLASS_CATALOGUE:
        raise InvalidClassError(f"Unknown class: {class_id.label}")
    return class_id


@dataclass(frozen=True)
class FloorMapper:
    """Maps classes to building floors using a layout table.

    The layout must partition the class catalogue: each class on exactly one
    floor. Reassigning floors only means passing a different table.
    """

    layout: Mapping[Floor, frozenset[ClassIdentifier]] = field(default_factory=lambda: dict(DEFAULT_FLOOR_LAYOUT))

    def __post_init__(self) -> None:
        index: dict[ClassIdentifier, Floor] = {}
        for floor, classes in self.layout.items():
            for class_id in classes:
                if class_id in index:
                    raise ValidationError(
                        f"Class {class_id.label} assigned to floors {index[class_id].value} and {floor.value}"
                    )
                index[class_id] = floor

        missing = CLASS_CATALOGUE - index.keys()
        if missing:
            labels = ", ".join(c.label for c in sorted(missing))
            raise ValidationError(f"Classes without a floor: {labels}")

        object.__setattr__(self, "_index", index)

    def resolve_floor(self, grade, section) -> Floor:
        class_id = to_class_identifier(grade, section)
        return self._index[class_id]

    def students_on_floor(self, floor: Floor) -> ClassPredicate:
        """Predicate over (grade, section) matching the classes on ``floor``.

        Pairs outside the catalogue match no floor.
        """

        classes = self.layout.get(require_enum(Floor, floor, "Floor"), frozenset())

        def predicate(grade, section) -> bool:
            try:
                return to_class_identifier(grade, section) in classes
            except InvalidClassError:
                return False

        return predicate

    def classes_on_floor(self, floor: Floor) -> list[ClassIdentifier]:
        return sorted(self.layout.get(require_enum(Floor, floor, "Floor"), frozenset()))


_default_mapper = FloorMapper()


def resolve_floor(grade, section) -> Floor:
    return _default_mapper.resolve_floor(grade, section)


def students_on_floor(floor: Floor) -> ClassPredicate:
    return _default_mapper.students_on_floor(floor)

from __future__ import annotations

from enum import Enum

from core.exceptions import ValidationError


class DependencyType(str, Enum):
    FINISH_TO_START = "finish-to-start"
    START_TO_START = "start-to-start"
    FINISH_TO_FINISH = "finish-to-finish"
    START_TO_FINISH = "start-to-finish"

    @property
    def short_code(self) -> str:
        return _SHORT_CODES[self]


_SHORT_CODES = {
    DependencyType.FINISH_TO_START: "FS",
    DependencyType.START_TO_START: "SS",
    DependencyType.FINISH_TO_FINISH: "FF",
    DependencyType.START_TO_FINISH: "SF",
}
_BY_SHORT_CODE = {code: dep_type for dep_type, code in _SHORT_CODES.items()}


def as_dependency_type(value: object) -> DependencyType:
    """Accepts an enum member, its value ("finish-to-start") or a short code ("FS")."""
    if isinstance(value, DependencyType):
        return value
    if value is None or value == "":
        return DependencyType.FINISH_TO_START
    raw = str(value).strip()
    by_code = _BY_SHORT_CODE.get(raw.upper())
    if by_code is not None:
        return by_code
    try:
        return DependencyType(raw.lower())
    except ValueError:
        raise ValidationError(
            f"Unsupported dependency type: {value!r}",
            code="INVALID_DEPENDENCY_TYPE",
        ) from None


__all__ = ["DependencyType", "as_dependency_type"]

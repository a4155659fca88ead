"""Length bounds and their resolution against system limits.

Every generator and validator accepts a requested ``(min, max)`` pair.  The
pair ``(0, 0)`` means "unset" and is replaced by the system limits.  Any other
pair must satisfy ``min <= max`` and lie inside the system limits; violations
raise :class:`~inputforge.utils.errors.RangeError`.  When both the lower and
the upper limit are violated, both are reported in one error.
"""

from __future__ import annotations

from dataclasses import dataclass

from .utils.errors import LengthError, RangeError

__all__ = ["LengthBound", "resolve_bounds", "check_measured_length"]


@dataclass(slots=True, frozen=True)
class LengthBound:
    """Inclusive length interval ``[min, max]``."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min < 0:
            raise RangeError("minimum length must not be negative")
        if self.max < self.min:
            raise RangeError("maximum length can not be less than minimum length")

    def __contains__(self, length: object) -> bool:
        return isinstance(length, int) and self.min <= length <= self.max


def resolve_bounds(req_min: int, req_max: int, sys_min: int, sys_max: int) -> LengthBound:
    """Return the effective bound for a request against the system limits."""

    if req_min == 0 and req_max == 0:
        return LengthBound(sys_min, sys_max)

    if req_max < req_min:
        raise RangeError(
            f"maximum length {req_max} can not be less than minimum length {req_min}"
        )

    problems: list[str] = []
    if req_min < sys_min:
        problems.append(f"minimum length must not be less than {sys_min}")
    if req_max > sys_max:
        problems.append(f"maximum length must not exceed {sys_max}")
    if problems:
        raise RangeError("; ".join(problems))

    return LengthBound(req_min, req_max)


def check_measured_length(
    length: int, bound: LengthBound, *, what: str, units: str = "characters"
) -> LengthError | None:
    """Return a :class:`LengthError` when ``length`` falls outside ``bound``."""

    if length < bound.min:
        return LengthError(
            f"{what} length of {length} is less than minimum length of {bound.min} {units}"
        )
    if length > bound.max:
        return LengthError(
            f"{what} length of {length} exceeds maximum length of {bound.max} {units}"
        )
    return None

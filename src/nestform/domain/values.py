"""Calendar point and range value shapes.

Every scalar component is carried as the string the user typed, where the
empty string means "not yet entered".  :func:`parse_number` turns one into
``int | None`` so callers never re-derive blank/numeric semantics.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

_NUMBER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$", re.ASCII)


def _coerce_component(value: Any) -> Any:
    # Sample documents carry bare integers; bool is an int subclass but never a component.
    if value is None:
        return ""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


Component = Annotated[str, BeforeValidator(_coerce_component)]


def is_blank(raw: str) -> bool:
    """True when the component has not been entered."""
    return raw == ""


def is_numeric(raw: str) -> bool:
    """True when *raw* is a base-10 integer numeral in ASCII digits."""
    return _NUMBER_RE.match(raw) is not None


def parse_number(raw: str) -> int | None:
    """Parse a component into an integer, or ``None`` if blank or non-numeric."""
    if is_blank(raw) or not is_numeric(raw):
        return None
    return int(raw)


class _Point(BaseModel):
    """Shared behaviour for calendar points."""

    model_config = {"frozen": True}

    def components(self) -> dict[str, str]:
        """Raw components in declaration order."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def has_any(self) -> bool:
        return any(not is_blank(v) for v in self.components().values())

    def is_complete(self) -> bool:
        return all(not is_blank(v) for v in self.components().values())


class YearValue(_Point):
    year: Component


class MonthValue(_Point):
    year: Component
    month: Component


class DateValue(_Point):
    year: Component
    month: Component
    day: Component


class _Range(BaseModel):
    """Two endpoints of the same point shape."""

    model_config = {"frozen": True, "populate_by_name": True}

    def endpoints(self) -> dict[str, _Point]:
        return {"from": self.from_, "to": self.to}  # type: ignore[attr-defined]

    def has_any(self) -> bool:
        return any(p.has_any() for p in self.endpoints().values())

    def is_complete(self) -> bool:
        return all(p.is_complete() for p in self.endpoints().values())


class YearRange(_Range):
    from_: YearValue = Field(alias="from")
    to: YearValue


class MonthRange(_Range):
    from_: MonthValue = Field(alias="from")
    to: MonthValue


class DateRange(_Range):
    from_: DateValue = Field(alias="from")
    to: DateValue


class TextValue(BaseModel):
    """Free-text value."""

    model_config = {"frozen": True}

    text: str

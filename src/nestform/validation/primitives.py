"""Year, month and day component validators.

A blank component always passes here; whether it may be blank is decided
by the composite and field rules.  A non-blank component reports exactly
one of: not numeric, below the minimum, above the maximum.
"""

from __future__ import annotations

from nestform.config.models import ComponentBounds, DateBoundsConfig
from nestform.domain.messages import MessageCatalog, MessageId
from nestform.domain.values import is_blank, parse_number
from nestform.domain.violations import Violation

COMPONENTS: tuple[str, ...] = ("year", "month", "day")


def check_component(
    name: str,
    raw: str,
    bounds: ComponentBounds,
    catalog: MessageCatalog,
) -> list[Violation]:
    """Validate one scalar component; the path is ``(name,)``."""
    if is_blank(raw):
        return []
    number = parse_number(raw)
    if number is None:
        return [_violation(name, MessageId.NOT_NUMERIC, catalog)]
    if number < bounds.min:
        return [_violation(name, MessageId.BELOW_MIN, catalog, limit=bounds.min)]
    if number > bounds.max:
        return [_violation(name, MessageId.ABOVE_MAX, catalog, limit=bounds.max)]
    return []


def component_in_bounds(name: str, raw: str, bounds: DateBoundsConfig) -> bool:
    """True for a non-blank numeric component inside its bounds."""
    number = parse_number(raw)
    limits = bounds.for_component(name)
    return number is not None and limits.min <= number <= limits.max


class PrimitiveValidator:
    """Year/month/day checks bound to one configuration and locale."""

    def __init__(self, bounds: DateBoundsConfig, catalog: MessageCatalog) -> None:
        self._bounds = bounds
        self._catalog = catalog

    def year(self, raw: str) -> list[Violation]:
        return check_component("year", raw, self._bounds.year, self._catalog)

    def month(self, raw: str) -> list[Violation]:
        return check_component("month", raw, self._bounds.month, self._catalog)

    def day(self, raw: str) -> list[Violation]:
        return check_component("day", raw, self._bounds.day, self._catalog)

    def components(self, values: dict[str, str]) -> list[Violation]:
        """Check each named component in order."""
        violations: list[Violation] = []
        for name, raw in values.items():
            violations.extend(getattr(self, name)(raw))
        return violations


def _violation(name: str, code: MessageId, catalog: MessageCatalog, **fields: int) -> Violation:
    return Violation(path=(name,), message=catalog.render(code, noun=name, **fields), code=code)

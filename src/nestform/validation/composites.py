"""Rules for composite values: points and ranges of year/month/date.

Each shape owns an ordered list of :class:`~nestform.domain.violations.Rule`
objects run by :func:`~nestform.domain.violations.run_rules`:

1. component checks (bounds, numeric) at ``value.<component>``
2. all-or-nothing completeness
3. required completeness
4. calendar validity (date shapes only)
5. span limit (range shapes only, once both endpoints are filled)

Rules 2-5 report at ``value`` (calendar validity at ``value.from`` /
``value.to`` for ranges).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from nestform.config.models import ValidationConfig
from nestform.domain.dates import get_months_diff, get_years_diff, is_valid_date, is_within_years
from nestform.domain.messages import MessageCatalog, MessageId
from nestform.domain.values import (
    DateRange,
    DateValue,
    MonthRange,
    MonthValue,
    YearRange,
    YearValue,
)
from nestform.domain.violations import Rule, Violation, prefixed, run_rules
from nestform.validation.primitives import PrimitiveValidator, component_in_bounds

V = TypeVar("V")

VALUE = ("value",)


@dataclass(frozen=True)
class FieldInput(Generic[V]):
    """A value together with the ``required`` flag of its owning field."""

    value: V
    required: bool


class CompositeValidator:
    """Builds and runs the rule list for every composite shape."""

    def __init__(self, config: ValidationConfig, catalog: MessageCatalog) -> None:
        self._config = config
        self._catalog = catalog
        self._primitives = PrimitiveValidator(config.bounds, catalog)

        self.date_rules: list[Rule[FieldInput[DateValue]]] = [
            Rule("components", self._point_components),
            Rule("all_or_nothing", self._all_or_nothing("date")),
            Rule("required", self._required("date")),
            Rule("calendar", self._calendar_date),
        ]
        self.month_rules: list[Rule[FieldInput[MonthValue]]] = [
            Rule("components", self._point_components),
            Rule("all_or_nothing", self._all_or_nothing("month_value")),
            Rule("required", self._required("month_value")),
        ]
        self.year_rules: list[Rule[FieldInput[YearValue]]] = [
            Rule("components", self._point_components),
            Rule("all_or_nothing", self._all_or_nothing("year_value")),
            Rule("required", self._required("year_value")),
        ]
        self.date_range_rules: list[Rule[FieldInput[DateRange]]] = [
            Rule("components", self._range_components),
            Rule("all_or_nothing", self._all_or_nothing("date_range")),
            Rule("required", self._required("date_range")),
            Rule("calendar", self._calendar_range),
            Rule("span", self._date_span),
        ]
        self.month_range_rules: list[Rule[FieldInput[MonthRange]]] = [
            Rule("components", self._range_components),
            Rule("all_or_nothing", self._all_or_nothing("month_range")),
            Rule("required", self._required("month_range")),
            Rule("span", self._month_span),
        ]
        self.year_range_rules: list[Rule[FieldInput[YearRange]]] = [
            Rule("components", self._range_components),
            Rule("all_or_nothing", self._all_or_nothing("year_range")),
            Rule("required", self._required("year_range")),
            Rule("span", self._year_span),
        ]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def date(self, value: DateValue, *, required: bool) -> list[Violation]:
        return run_rules(self.date_rules, FieldInput(value, required))

    def month(self, value: MonthValue, *, required: bool) -> list[Violation]:
        return run_rules(self.month_rules, FieldInput(value, required))

    def year(self, value: YearValue, *, required: bool) -> list[Violation]:
        return run_rules(self.year_rules, FieldInput(value, required))

    def date_range(self, value: DateRange, *, required: bool) -> list[Violation]:
        return run_rules(self.date_range_rules, FieldInput(value, required))

    def month_range(self, value: MonthRange, *, required: bool) -> list[Violation]:
        return run_rules(self.month_range_rules, FieldInput(value, required))

    def year_range(self, value: YearRange, *, required: bool) -> list[Violation]:
        return run_rules(self.year_range_rules, FieldInput(value, required))

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _point_components(
        self, subject: FieldInput[DateValue] | FieldInput[MonthValue] | FieldInput[YearValue]
    ) -> list[Violation]:
        return prefixed(VALUE, self._primitives.components(subject.value.components()))

    def _range_components(
        self, subject: FieldInput[DateRange] | FieldInput[MonthRange] | FieldInput[YearRange]
    ) -> list[Violation]:
        violations: list[Violation] = []
        for end, point in subject.value.endpoints().items():
            violations.extend(prefixed((*VALUE, end), self._primitives.components(point.components())))
        return violations

    def _all_or_nothing(self, noun: str) -> Callable[[FieldInput[V]], list[Violation]]:
        def check(subject: FieldInput[V]) -> list[Violation]:
            value = subject.value
            if value.has_any() and not value.is_complete():  # type: ignore[attr-defined]
                return [self._at_value(MessageId.INCOMPLETE, noun=noun)]
            return []

        return check

    def _required(self, noun: str) -> Callable[[FieldInput[V]], list[Violation]]:
        def check(subject: FieldInput[V]) -> list[Violation]:
            if subject.required and not subject.value.is_complete():  # type: ignore[attr-defined]
                return [self._at_value(MessageId.REQUIRED, noun=noun)]
            return []

        return check

    def _calendar_date(self, subject: FieldInput[DateValue]) -> list[Violation]:
        if self._names_missing_day(subject.value):
            return [self._at_value(MessageId.INVALID_DATE)]
        return []

    def _calendar_range(self, subject: FieldInput[DateRange]) -> list[Violation]:
        return [
            self._at_value(MessageId.INVALID_DATE, end)
            for end, point in subject.value.endpoints().items()
            if isinstance(point, DateValue) and self._names_missing_day(point)
        ]

    def _date_span(self, subject: FieldInput[DateRange]) -> list[Violation]:
        value = subject.value
        if not value.is_complete():
            return []
        limit = self._config.range.date_max_years
        if is_within_years(value.from_, value.to, limit):
            return []
        return [self._at_value(MessageId.SPAN_YEARS, limit=limit)]

    def _month_span(self, subject: FieldInput[MonthRange]) -> list[Violation]:
        value = subject.value
        if not value.is_complete():
            return []
        limit = self._config.range.month_max_months
        diff = get_months_diff(value.from_, value.to)
        if diff is not None and diff <= limit:
            return []
        return [self._at_value(MessageId.SPAN_MONTHS, limit=limit)]

    def _year_span(self, subject: FieldInput[YearRange]) -> list[Violation]:
        value = subject.value
        if not value.is_complete():
            return []
        limit = self._config.range.year_max_years
        diff = get_years_diff(value.from_, value.to)
        if diff is not None and diff <= limit:
            return []
        return [self._at_value(MessageId.SPAN_YEARS, limit=limit)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _names_missing_day(self, point: DateValue) -> bool:
        """Complete, in-bounds components that still name no calendar day."""
        bounds = self._config.bounds
        in_bounds = all(
            component_in_bounds(name, raw, bounds) for name, raw in point.components().items()
        )
        return in_bounds and not is_valid_date(point)

    def _at_value(self, code: MessageId, *tail: str, noun: str | None = None, **fields: int) -> Violation:
        return Violation(
            path=(*VALUE, *tail),
            message=self._catalog.render(code, noun=noun, **fields),
            code=code,
        )

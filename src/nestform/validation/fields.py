"""Per-field validation: one dispatch point from kind to rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from nestform.config.models import ValidationConfig
from nestform.domain.errors import ParamKindError
from nestform.domain.messages import MessageCatalog, MessageId
from nestform.domain.params import PARAM_TYPES, PARAM_VALUE_SHAPES, ParamKind, parse_param
from nestform.domain.values import TextValue
from nestform.domain.violations import ValidationReport, Violation
from nestform.validation.composites import CompositeValidator


ValueCheck = Callable[[Any, bool], list[Violation]]


class FieldValidator:
    """Validates single params against the rules of their declared kind."""

    def __init__(self, config: ValidationConfig | None = None, *, locale: str | None = None) -> None:
        self.config = config or ValidationConfig()
        self.catalog = MessageCatalog(locale or self.config.locale)
        composites = CompositeValidator(self.config, self.catalog)
        self._checks: dict[ParamKind, ValueCheck] = {
            ParamKind.TEXT: self._text,
            ParamKind.DATE: lambda v, r: composites.date(v, required=r),
            ParamKind.MONTH: lambda v, r: composites.month(v, required=r),
            ParamKind.YEAR: lambda v, r: composites.year(v, required=r),
            ParamKind.DATE_RANGE: lambda v, r: composites.date_range(v, required=r),
            ParamKind.MONTH_RANGE: lambda v, r: composites.month_range(v, required=r),
            ParamKind.YEAR_RANGE: lambda v, r: composites.year_range(v, required=r),
        }

    def check_value(self, kind: ParamKind | str, value: BaseModel, *, required: bool) -> list[Violation]:
        """Run *kind*'s rules on *value*.

        Raises:
            ParamKindError: *kind* is unknown, or *value* is not the shape it declares.
        """
        try:
            kind = ParamKind(kind)
        except ValueError as exc:
            raise ParamKindError(f"Unknown param kind {kind!r}") from exc
        expected = PARAM_VALUE_SHAPES[kind]
        if type(value) is not expected:
            msg = f"{kind.value} expects {expected.__name__}, got {type(value).__name__}"
            raise ParamKindError(msg)
        return self._checks[kind](value, required)

    def validate(self, param: Any) -> list[Violation]:
        """Validate one param (a model or plain data); paths start at the param."""
        if not isinstance(param, PARAM_TYPES):
            param = parse_param(param)
        return self.check_value(param.kind, param.value, required=param.required)

    def report(self, param: Any) -> ValidationReport:
        return ValidationReport(violations=self.validate(param))

    def _text(self, value: TextValue, required: bool) -> list[Violation]:
        if required and len(value.text) == 0:
            return [
                Violation(
                    path=("value", "text"),
                    message=self.catalog.render(MessageId.TEXT_REQUIRED),
                    code=MessageId.TEXT_REQUIRED,
                )
            ]
        return []

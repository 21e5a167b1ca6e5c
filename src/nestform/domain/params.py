"""Field (param) kinds, conditions and forms.

A param is a closed tagged union discriminated by ``type``.  Each variant
pins the value shape for its kind; :data:`PARAM_VALUE_SHAPES` is the single
place that pairs a kind with its shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StrictBool, TypeAdapter, ValidationError, model_validator

from nestform.domain.errors import FormShapeError
from nestform.domain.values import (
    DateRange,
    DateValue,
    MonthRange,
    MonthValue,
    TextValue,
    YearRange,
    YearValue,
)


class ParamKind(StrEnum):
    """The seven field kinds a form may contain."""

    TEXT = "text"
    DATE = "date"
    MONTH = "month"
    YEAR = "year"
    DATE_RANGE = "date_range"
    MONTH_RANGE = "month_range"
    YEAR_RANGE = "year_range"


PARAM_VALUE_SHAPES: dict[ParamKind, type[BaseModel]] = {
    ParamKind.TEXT: TextValue,
    ParamKind.DATE: DateValue,
    ParamKind.MONTH: MonthValue,
    ParamKind.YEAR: YearValue,
    ParamKind.DATE_RANGE: DateRange,
    ParamKind.MONTH_RANGE: MonthRange,
    ParamKind.YEAR_RANGE: YearRange,
}


class ReadonlyInfo(BaseModel):
    """Display metadata; never validated beyond its shape."""

    model_config = {"frozen": True}

    title: str
    description: str


class _BaseParam(BaseModel):
    model_config = {"frozen": True}

    required: StrictBool
    readonly: ReadonlyInfo

    @property
    def kind(self) -> ParamKind:
        return ParamKind(self.type)  # type: ignore[attr-defined]


class TextParam(_BaseParam):
    type: Literal["text"]
    value: TextValue


class DateParam(_BaseParam):
    type: Literal["date"]
    value: DateValue


class MonthParam(_BaseParam):
    type: Literal["month"]
    value: MonthValue


class YearParam(_BaseParam):
    type: Literal["year"]
    value: YearValue


class DateRangeParam(_BaseParam):
    type: Literal["date_range"]
    value: DateRange


class MonthRangeParam(_BaseParam):
    type: Literal["month_range"]
    value: MonthRange


class YearRangeParam(_BaseParam):
    type: Literal["year_range"]
    value: YearRange


PARAM_TYPES: tuple[type[_BaseParam], ...] = (
    TextParam,
    DateParam,
    MonthParam,
    YearParam,
    DateRangeParam,
    MonthRangeParam,
    YearRangeParam,
)

Param = Annotated[
    TextParam
    | DateParam
    | MonthParam
    | YearParam
    | DateRangeParam
    | MonthRangeParam
    | YearRangeParam,
    Field(discriminator="type"),
]


class Condition(BaseModel):
    """A titled group of params."""

    model_config = {"frozen": True}

    readonly: ReadonlyInfo
    params: list[Param]

    @model_validator(mode="before")
    @classmethod
    def _lift_readonly(cls, data: Any) -> Any:
        # Sample documents put title/description directly on the condition.
        if isinstance(data, Mapping) and "readonly" not in data and "title" in data:
            data = dict(data)
            data["readonly"] = {
                "title": data.pop("title"),
                "description": data.pop("description", ""),
            }
        return data


class Form(BaseModel):
    """A whole form document: the unit of validation."""

    model_config = {"frozen": True}

    name: str
    description: str
    conditions: list[Condition]


_PARAM_ADAPTER: TypeAdapter[Param] = TypeAdapter(Param)


def parse_param(data: Any) -> Param:
    """Build a param from plain data, raising :class:`FormShapeError`."""
    try:
        return _PARAM_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise FormShapeError.from_validation_error("param", exc) from exc


def parse_form(data: Any) -> Form:
    """Build a form from plain data, raising :class:`FormShapeError`."""
    if isinstance(data, Form):
        return data
    try:
        return Form.model_validate(data)
    except ValidationError as exc:
        raise FormShapeError.from_validation_error("form", exc) from exc

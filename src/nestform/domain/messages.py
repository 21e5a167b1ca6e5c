"""User-facing violation messages.

One catalog per locale, keyed by message id.  Templates use
``str.format`` fields filled from the active configuration, so changing a
bound or span limit changes the rendered text with it.  ``ja`` carries the
authoritative wording.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class MessageId(StrEnum):
    """Stable identifiers for every violation the core can report."""

    NOT_NUMERIC = "not_numeric"
    BELOW_MIN = "below_min"
    ABOVE_MAX = "above_max"
    TEXT_REQUIRED = "text_required"
    REQUIRED = "required"
    INCOMPLETE = "incomplete"
    INVALID_DATE = "invalid_date"
    SPAN_YEARS = "span_years"
    SPAN_MONTHS = "span_months"
    NAME_REQUIRED = "name_required"
    DESCRIPTION_REQUIRED = "description_required"
    CONDITIONS_EMPTY = "conditions_empty"
    PARAMS_EMPTY = "params_empty"


# Display names for components and value shapes, per locale.
_NOUNS: dict[str, dict[str, str]] = {
    "ja": {
        "year": "年",
        "month": "月",
        "day": "日",
        "date": "日付",
        "month_value": "年月",
        "year_value": "年",
        "date_range": "日付範囲",
        "month_range": "年月範囲",
        "year_range": "年範囲",
    },
    "en": {
        "year": "year",
        "month": "month",
        "day": "day",
        "date": "date",
        "month_value": "year and month",
        "year_value": "year",
        "date_range": "date range",
        "month_range": "year-month range",
        "year_range": "year range",
    },
}

_TEMPLATES: dict[str, dict[MessageId, str]] = {
    "ja": {
        MessageId.NOT_NUMERIC: "{noun}は数値で入力してください",
        MessageId.BELOW_MIN: "{noun}は{limit}以上で入力してください",
        MessageId.ABOVE_MAX: "{noun}は{limit}以下で入力してください",
        MessageId.TEXT_REQUIRED: "テキストを入力してください",
        MessageId.REQUIRED: "{noun}を入力してください",
        MessageId.INCOMPLETE: "{noun}を完全に入力するか、すべてクリアしてください",
        MessageId.INVALID_DATE: "存在しない日付です",
        MessageId.SPAN_YEARS: "範囲は{limit}年以内で入力してください",
        MessageId.SPAN_MONTHS: "範囲は{limit}ヶ月以内で入力してください",
        MessageId.NAME_REQUIRED: "名前は必須です",
        MessageId.DESCRIPTION_REQUIRED: "概要は必須です",
        MessageId.CONDITIONS_EMPTY: "少なくとも1つの条件が必要です",
        MessageId.PARAMS_EMPTY: "少なくとも1つのパラメータが必要です",
    },
    "en": {
        MessageId.NOT_NUMERIC: "Please enter the {noun} as a number",
        MessageId.BELOW_MIN: "The {noun} must be at least {limit}",
        MessageId.ABOVE_MAX: "The {noun} must be at most {limit}",
        MessageId.TEXT_REQUIRED: "Please enter text",
        MessageId.REQUIRED: "Please enter a {noun}",
        MessageId.INCOMPLETE: "Please fill in the whole {noun} or clear it",
        MessageId.INVALID_DATE: "This date does not exist",
        MessageId.SPAN_YEARS: "The range must be within {limit} year(s)",
        MessageId.SPAN_MONTHS: "The range must be within {limit} month(s)",
        MessageId.NAME_REQUIRED: "Name is required",
        MessageId.DESCRIPTION_REQUIRED: "Description is required",
        MessageId.CONDITIONS_EMPTY: "At least one condition is required",
        MessageId.PARAMS_EMPTY: "At least one parameter is required",
    },
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(_TEMPLATES)


class MessageCatalog:
    """Renders message ids for one locale."""

    def __init__(self, locale: str) -> None:
        if locale not in _TEMPLATES:
            msg = f"Unsupported locale {locale!r}; expected one of {', '.join(SUPPORTED_LOCALES)}"
            raise ValueError(msg)
        self.locale = locale
        self._templates = _TEMPLATES[locale]
        self._nouns = _NOUNS[locale]

    def noun(self, key: str) -> str:
        return self._nouns[key]

    def render(self, message_id: MessageId, *, noun: str | None = None, **fields: Any) -> str:
        """Render *message_id*; *noun* is a noun key looked up in this locale."""
        if noun is not None:
            fields["noun"] = self.noun(noun)
        return self._templates[message_id].format(**fields)

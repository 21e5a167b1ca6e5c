"""Tests for composite value rules."""

import pytest

from nestform.config.models import RangeConfig, ValidationConfig
from nestform.domain.messages import MessageCatalog, MessageId
from nestform.domain.values import DateRange, DateValue, MonthRange, MonthValue, YearRange, YearValue
from nestform.validation.composites import CompositeValidator


@pytest.fixture
def composites() -> CompositeValidator:
    return CompositeValidator(ValidationConfig(), MessageCatalog("ja"))


def dv(y: str = "", m: str = "", d: str = "") -> DateValue:
    return DateValue(year=y, month=m, day=d)


def mv(y: str = "", m: str = "") -> MonthValue:
    return MonthValue(year=y, month=m)


def codes(violations: list) -> list[MessageId]:
    return [v.code for v in violations]


class TestDate:
    def test_partial_fails_regardless_of_required(self, composites: CompositeValidator) -> None:
        for required in (False, True):
            result = composites.date(dv("2024", "", "1"), required=required)
            assert MessageId.INCOMPLETE in codes(result)

    def test_partial_message(self, composites: CompositeValidator) -> None:
        [v] = composites.date(dv("2024", "", "1"), required=False)
        assert v.path == ("value",)
        assert v.message == "日付を完全に入力するか、すべてクリアしてください"

    def test_blank_optional_passes(self, composites: CompositeValidator) -> None:
        assert composites.date(dv(), required=False) == []

    def test_blank_required(self, composites: CompositeValidator) -> None:
        [v] = composites.date(dv(), required=True)
        assert v.code is MessageId.REQUIRED
        assert v.message == "日付を入力してください"

    def test_partial_required_reports_both_in_order(self, composites: CompositeValidator) -> None:
        result = composites.date(dv("2024", "", ""), required=True)
        assert codes(result) == [MessageId.INCOMPLETE, MessageId.REQUIRED]

    def test_complete_valid(self, composites: CompositeValidator) -> None:
        assert composites.date(dv("2024", "2", "29"), required=True) == []

    def test_calendar_invalid(self, composites: CompositeValidator) -> None:
        [v] = composites.date(dv("2023", "2", "29"), required=False)
        assert v.code is MessageId.INVALID_DATE
        assert v.path == ("value",)

    def test_out_of_bounds_reports_component_only(self, composites: CompositeValidator) -> None:
        result = composites.date(dv("2024", "13", "1"), required=False)
        assert codes(result) == [MessageId.ABOVE_MAX]
        assert result[0].path == ("value", "month")


class TestMonth:
    def test_partial(self, composites: CompositeValidator) -> None:
        [v] = composites.month(mv("", "4"), required=False)
        assert v.message == "年月を完全に入力するか、すべてクリアしてください"

    def test_required(self, composites: CompositeValidator) -> None:
        [v] = composites.month(mv(), required=True)
        assert v.message == "年月を入力してください"

    def test_component_path(self, composites: CompositeValidator) -> None:
        [v] = composites.month(mv("2024", "0"), required=False)
        assert v.path == ("value", "month")


class TestYear:
    def test_required(self, composites: CompositeValidator) -> None:
        [v] = composites.year(YearValue(year=""), required=True)
        assert v.message == "年を入力してください"

    def test_optional_blank(self, composites: CompositeValidator) -> None:
        assert composites.year(YearValue(year=""), required=False) == []

    def test_bounds(self, composites: CompositeValidator) -> None:
        [v] = composites.year(YearValue(year="3000"), required=False)
        assert v.path == ("value", "year")


class TestDateRange:
    def test_span_over_a_year(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv("2023", "1", "1"), to=dv("2024", "6", "1"))
        [v] = composites.date_range(value, required=False)
        assert v.code is MessageId.SPAN_YEARS
        assert v.message == "範囲は1年以内で入力してください"

    def test_span_boundary_inclusive(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv("2023", "1", "15"), to=dv("2024", "1", "15"))
        assert composites.date_range(value, required=True) == []

    def test_incomplete_skips_span(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv("2000", "1", "1"), to=dv("2024", "6", ""))
        assert codes(composites.date_range(value, required=False)) == [MessageId.INCOMPLETE]

    def test_required_blank(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv(), to=dv())
        [v] = composites.date_range(value, required=True)
        assert v.message == "日付範囲を入力してください"

    def test_component_paths(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv("1800", "1", "1"), to=dv("2024", "1", "99"))
        result = composites.date_range(value, required=False)
        paths = [v.path for v in result]
        assert ("value", "from", "year") in paths
        assert ("value", "to", "day") in paths

    def test_invalid_endpoint_fails_closed(self, composites: CompositeValidator) -> None:
        value = DateRange(from_=dv("2023", "2", "30"), to=dv("2023", "3", "1"))
        result = composites.date_range(value, required=False)
        assert codes(result) == [MessageId.INVALID_DATE, MessageId.SPAN_YEARS]
        assert result[0].path == ("value", "from")


class TestMonthRange:
    def test_twelve_months_allowed(self, composites: CompositeValidator) -> None:
        value = MonthRange(from_=mv("2024", "1"), to=mv("2025", "1"))
        assert composites.month_range(value, required=True) == []

    def test_thirteen_months_rejected(self, composites: CompositeValidator) -> None:
        value = MonthRange(from_=mv("2024", "1"), to=mv("2025", "2"))
        [v] = composites.month_range(value, required=False)
        assert v.message == "範囲は12ヶ月以内で入力してください"

    def test_unparseable_fails_closed(self, composites: CompositeValidator) -> None:
        value = MonthRange(from_=mv("2024", "x"), to=mv("2024", "2"))
        result = composites.month_range(value, required=False)
        assert codes(result) == [MessageId.NOT_NUMERIC, MessageId.SPAN_MONTHS]

    def test_partial(self, composites: CompositeValidator) -> None:
        value = MonthRange(from_=mv("2024", "1"), to=mv())
        [v] = composites.month_range(value, required=False)
        assert v.message == "年月範囲を完全に入力するか、すべてクリアしてください"


class TestYearRange:
    def test_one_year_allowed(self, composites: CompositeValidator) -> None:
        value = YearRange(from_=YearValue(year="2023"), to=YearValue(year="2024"))
        assert composites.year_range(value, required=False) == []

    def test_two_years_rejected(self, composites: CompositeValidator) -> None:
        value = YearRange(from_=YearValue(year="2022"), to=YearValue(year="2024"))
        [v] = composites.year_range(value, required=False)
        assert v.code is MessageId.SPAN_YEARS

    def test_required(self, composites: CompositeValidator) -> None:
        value = YearRange(from_=YearValue(year="2022"), to=YearValue(year=""))
        result = composites.year_range(value, required=True)
        assert [v.message for v in result] == [
            "年範囲を完全に入力するか、すべてクリアしてください",
            "年範囲を入力してください",
        ]


class TestRetunedLimits:
    def test_month_limit_from_config(self) -> None:
        config = ValidationConfig(range=RangeConfig(month_max_months=6))
        composites = CompositeValidator(config, MessageCatalog("en"))
        value = MonthRange(from_=mv("2024", "1"), to=mv("2024", "8"))
        [v] = composites.month_range(value, required=False)
        assert v.message == "The range must be within 6 month(s)"

    def test_rule_names(self, composites: CompositeValidator) -> None:
        assert [r.name for r in composites.date_range_rules] == [
            "components",
            "all_or_nothing",
            "required",
            "calendar",
            "span",
        ]

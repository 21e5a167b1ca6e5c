"""Tests for message catalogs."""

import pytest

from nestform.domain.messages import SUPPORTED_LOCALES, MessageCatalog, MessageId


class TestMessageCatalog:
    def test_locales(self) -> None:
        assert set(SUPPORTED_LOCALES) == {"ja", "en"}

    def test_every_id_in_every_locale(self) -> None:
        for locale in SUPPORTED_LOCALES:
            catalog = MessageCatalog(locale)
            for message_id in MessageId:
                assert catalog.render(message_id, noun="date", limit=1)

    def test_ja_wording(self) -> None:
        catalog = MessageCatalog("ja")
        assert catalog.render(MessageId.NOT_NUMERIC, noun="year") == "年は数値で入力してください"
        assert catalog.render(MessageId.BELOW_MIN, noun="year", limit=1900) == "年は1900以上で入力してください"
        assert catalog.render(MessageId.ABOVE_MAX, noun="day", limit=31) == "日は31以下で入力してください"
        assert catalog.render(MessageId.REQUIRED, noun="month_value") == "年月を入力してください"
        assert (
            catalog.render(MessageId.INCOMPLETE, noun="date_range")
            == "日付範囲を完全に入力するか、すべてクリアしてください"
        )
        assert catalog.render(MessageId.SPAN_MONTHS, limit=12) == "範囲は12ヶ月以内で入力してください"

    def test_en_wording(self) -> None:
        catalog = MessageCatalog("en")
        assert catalog.render(MessageId.TEXT_REQUIRED) == "Please enter text"
        assert catalog.render(MessageId.SPAN_YEARS, limit=1) == "The range must be within 1 year(s)"

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unsupported locale"):
            MessageCatalog("fr")

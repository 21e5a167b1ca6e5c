"""Shared pytest fixtures and test helpers for nestform tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from nestform.validation.fields import FieldValidator
from nestform.validation.forms import FormValidator


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's NESTFORM_* environment out of the tests."""
    for name in ("NESTFORM_CONFIG", "NESTFORM_LOCALE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no nestform.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fields() -> FieldValidator:
    """Field validator with default config and the ``ja`` catalog."""
    return FieldValidator()


@pytest.fixture
def fields_en() -> FieldValidator:
    return FieldValidator(locale="en")


@pytest.fixture
def forms() -> FormValidator:
    return FormValidator()


@pytest.fixture
def sample_form() -> dict[str, Any]:
    """A valid two-condition form covering every field kind."""
    return copy.deepcopy(SAMPLE_FORM)


@pytest.fixture
def form_file(tmp_path: Path, sample_form: dict[str, Any]) -> Path:
    path = tmp_path / "form.json"
    path.write_text(json.dumps(sample_form, ensure_ascii=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_param(kind: str, value: dict[str, Any], *, required: bool = False) -> dict[str, Any]:
    """Build a plain-data param of *kind*."""
    return {
        "type": kind,
        "value": value,
        "required": required,
        "readonly": {"title": kind, "description": f"{kind} field"},
    }


def date(year: str = "", month: str = "", day: str = "") -> dict[str, str]:
    return {"year": year, "month": month, "day": day}


def month(year: str = "", month_: str = "") -> dict[str, str]:
    return {"year": year, "month": month_}


def year(year_: str = "") -> dict[str, str]:
    return {"year": year_}


def span(start: dict[str, str], end: dict[str, str]) -> dict[str, Any]:
    return {"from": start, "to": end}


SAMPLE_FORM: dict[str, Any] = {
    "name": "会員登録フォーム",
    "description": "新規会員登録のための情報入力フォームです。",
    "conditions": [
        {
            "readonly": {"title": "基本情報", "description": "お客様の基本的な情報を入力してください"},
            "params": [
                make_param("text", {"text": "山田太郎"}, required=True),
                make_param("date", date("1990", "5", "15"), required=True),
                make_param("month", month("2024", "4")),
                make_param("year", year("2023")),
            ],
        },
        {
            "readonly": {"title": "契約期間", "description": "契約に関する期間を入力してください"},
            "params": [
                make_param("date_range", span(date("2024", "4", "1"), date("2025", "4", "1")), required=True),
                make_param("month_range", span(month("2024", "1"), month("2024", "12"))),
                make_param("year_range", span(year("2023"), year("2024"))),
            ],
        },
    ],
}

"""Tests for ValidationService."""

import json
from pathlib import Path
from typing import Any

from nestform.config.models import RangeConfig, ValidationConfig
from nestform.services.validate import ValidationService


class TestValidateDocument:
    def test_valid_form(self, sample_form: dict[str, Any]) -> None:
        result = ValidationService().validate_document(sample_form)
        assert result.ok
        assert result.op == "validate"
        assert result.data["count"] == 1
        assert result.data["violation_count"] == 0
        assert result.data["forms"][0]["name"] == "会員登録フォーム"
        assert "duration_ms" in result.meta

    def test_invalid_form(self, sample_form: dict[str, Any]) -> None:
        sample_form["name"] = ""
        result = ValidationService().validate_document(sample_form, source="f.json")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FORM"
        assert result.error.message == "f.json: 1 violation(s) in 1 form(s)"
        [violation] = result.data["forms"][0]["violations"]
        assert violation == {"path": ["name"], "message": "名前は必須です", "code": "name_required"}

    def test_list_of_forms(self, sample_form: dict[str, Any]) -> None:
        broken = json.loads(json.dumps(sample_form))
        broken["conditions"][0]["params"][0]["value"]["text"] = ""
        result = ValidationService().validate_document([sample_form, broken])
        assert not result.ok
        assert result.data["count"] == 2
        assert [f["ok"] for f in result.data["forms"]] == [True, False]
        assert result.error.detail == {"invalid_forms": [1]}

    def test_empty_list_warns(self) -> None:
        result = ValidationService().validate_document([], source="empty.json")
        assert result.ok
        assert result.data["count"] == 0
        assert result.warnings == ["empty.json: contains no forms"]

    def test_no_warnings_for_forms(self, sample_form: dict[str, Any]) -> None:
        assert ValidationService().validate_document([sample_form]).warnings == []

    def test_shape_error(self) -> None:
        result = ValidationService().validate_document({"name": "n"})
        assert not result.ok
        assert result.error.code == "INVALID_SHAPE"
        assert result.error.detail["index"] == 0
        assert result.error.detail["errors"]

    def test_config_reaches_rules(self, sample_form: dict[str, Any]) -> None:
        config = ValidationConfig(range=RangeConfig(month_max_months=3))
        result = ValidationService(config).validate_document(sample_form)
        assert not result.ok
        [violation] = result.data["forms"][0]["violations"]
        assert violation["path"] == ["conditions", 1, "params", 1, "value"]
        assert violation["message"] == "範囲は3ヶ月以内で入力してください"


class TestValidateFile:
    def test_valid_file(self, form_file: Path) -> None:
        result = ValidationService().validate_file(form_file)
        assert result.ok
        assert result.data["source"] == str(form_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = ValidationService().validate_file(tmp_path / "missing.json")
        assert not result.ok
        assert result.error.code == "FILE_NOT_FOUND"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = ValidationService().validate_file(path)
        assert result.error.code == "INVALID_JSON"
        assert result.error.detail["line"] == 1


class TestLimits:
    def test_reports_tables(self) -> None:
        result = ValidationService().limits()
        assert result.ok
        assert result.data["bounds"]["year"] == {"min": 1900, "max": 2100}
        assert result.data["range"] == {"date_max_years": 1, "month_max_months": 12, "year_max_years": 1}
        assert result.data["locale"] == "ja"

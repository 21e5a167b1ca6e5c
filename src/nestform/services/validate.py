"""ValidationService: validate form documents stored as JSON files.

Fetching forms is outside the core; this service is the thin adapter the
CLI uses to load documents, run :class:`FormValidator` over each one and
fold the outcome into a :class:`ServiceResult`.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

from nestform.config.models import ValidationConfig
from nestform.domain.errors import FormShapeError
from nestform.services.result import ServiceError, ServiceResult
from nestform.validation.forms import FormValidator

logger = logging.getLogger(__name__)


class ValidationService:
    """Validates form documents under one configuration."""

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._validator = FormValidator(config)
        self.config = self._validator.config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_document(self, document: Any, *, source: str = "<document>") -> ServiceResult:
        """Validate one in-memory document (a single form or a list of forms)."""
        started = time.perf_counter()
        documents = document if isinstance(document, list) else [document]

        forms: list[dict[str, Any]] = []
        for index, doc in enumerate(documents):
            try:
                report = self._validator.validate(doc)
            except FormShapeError as exc:
                logger.warning("Malformed form %d in %s: %s", index, source, exc)
                return ServiceResult(
                    ok=False,
                    op="validate",
                    error=ServiceError(
                        code="INVALID_SHAPE",
                        message=f"{source}: {exc}",
                        detail={"index": index, "errors": exc.errors},
                    ),
                )
            forms.append({"index": index, "name": _form_name(doc), **report.to_dict()})

        invalid = [f for f in forms if not f["ok"]]
        violation_count = sum(len(f["violations"]) for f in forms)
        data = {
            "source": source,
            "forms": forms,
            "count": len(forms),
            "violation_count": violation_count,
        }
        meta = {"duration_ms": round((time.perf_counter() - started) * 1000, 3)}
        if invalid:
            return ServiceResult(
                ok=False,
                op="validate",
                data=data,
                error=ServiceError(
                    code="INVALID_FORM",
                    message=f"{source}: {violation_count} violation(s) in {len(invalid)} form(s)",
                    detail={"invalid_forms": [f["index"] for f in invalid]},
                ),
                meta=meta,
            )
        warnings = [f"{source}: contains no forms"] if not forms else []
        return ServiceResult(ok=True, op="validate", data=data, warnings=warnings, meta=meta)

    def validate_file(self, path: Path) -> ServiceResult:
        """Load *path* as JSON and validate its form(s)."""
        if not path.is_file():
            return ServiceResult(
                ok=False,
                op="validate",
                error=ServiceError(
                    code="FILE_NOT_FOUND",
                    message=f"No such file: {path}",
                    detail={"path": str(path)},
                ),
            )
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            return ServiceResult(
                ok=False,
                op="validate",
                error=ServiceError(
                    code="INVALID_JSON",
                    message=f"Invalid JSON in {path}: {exc}",
                    detail={"path": str(path), "line": exc.lineno, "column": exc.colno},
                ),
            )
        logger.debug("Loaded %s", path)
        return self.validate_document(document, source=str(path))

    def limits(self) -> ServiceResult:
        """Report the effective bound and span tables."""
        return ServiceResult(
            ok=True,
            op="limits",
            data={
                "locale": self.config.locale,
                "bounds": self.config.bounds.model_dump(),
                "range": self.config.range.model_dump(),
            },
        )


def _form_name(document: Any) -> str:
    if isinstance(document, dict):
        return str(document.get("name", ""))
    return str(getattr(document, "name", ""))

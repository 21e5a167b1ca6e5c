"""Whole-form validation.

Visits every condition and every param and returns the complete, ordered
violation list; nothing short-circuits.
"""

from __future__ import annotations

import logging
from typing import Any

from nestform.config.models import ValidationConfig
from nestform.domain.messages import MessageId
from nestform.domain.params import Form, parse_form
from nestform.domain.violations import ValidationReport, Violation, prefixed
from nestform.validation.fields import FieldValidator

logger = logging.getLogger(__name__)


class FormValidator:
    """Validates form documents under one configuration and locale.

    Holds no state between calls, so one instance may be shared freely.
    """

    def __init__(self, config: ValidationConfig | None = None, *, locale: str | None = None) -> None:
        self.fields = FieldValidator(config, locale=locale)
        self.config = self.fields.config
        self.catalog = self.fields.catalog

    def validate(self, document: Any) -> ValidationReport:
        """Validate *document* (a :class:`Form` or plain data).

        Raises:
            FormShapeError: the document does not match the form data model.
        """
        form = parse_form(document)
        violations = self._form_level(form)
        for c_idx, condition in enumerate(form.conditions):
            if not condition.params:
                violations.append(self._violation(("conditions", c_idx, "params"), MessageId.PARAMS_EMPTY))
            for p_idx, param in enumerate(condition.params):
                violations.extend(
                    prefixed(("conditions", c_idx, "params", p_idx), self.fields.validate(param))
                )
        logger.debug(
            "Validated form %r: %d condition(s), %d violation(s)",
            form.name,
            len(form.conditions),
            len(violations),
        )
        return ValidationReport(violations=violations)

    def _form_level(self, form: Form) -> list[Violation]:
        violations: list[Violation] = []
        if len(form.name) == 0:
            violations.append(self._violation(("name",), MessageId.NAME_REQUIRED))
        if len(form.description) == 0:
            violations.append(self._violation(("description",), MessageId.DESCRIPTION_REQUIRED))
        if not form.conditions:
            violations.append(self._violation(("conditions",), MessageId.CONDITIONS_EMPTY))
        return violations

    def _violation(self, path: tuple[str | int, ...], code: MessageId) -> Violation:
        return Violation(path=path, message=self.catalog.render(code), code=code)


def validate_form(
    document: Any,
    config: ValidationConfig | None = None,
    *,
    locale: str | None = None,
) -> ValidationReport:
    """One-shot convenience wrapper around :class:`FormValidator`."""
    return FormValidator(config, locale=locale).validate(document)

"""Validation core: primitive, composite, field and form rules.

Everything here is a pure function of the document and a
:class:`~nestform.config.models.ValidationConfig`.
"""

from nestform.validation.fields import FieldValidator
from nestform.validation.forms import FormValidator, validate_form

__all__ = ["FieldValidator", "FormValidator", "validate_form"]

"""Contract errors: the document or the call is malformed.

These are raised, never reported as violations.  A violation means the
user's input is incomplete or out of range; these mean the caller handed
the core something that does not match the data model.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class FormShapeError(ValueError):
    """A document (or one param) does not match the form data model."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, what: str, exc: ValidationError) -> FormShapeError:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors(include_url=False, include_context=False, include_input=False)
        ]
        first = errors[0] if errors else {"loc": [], "msg": "invalid"}
        location = ".".join(str(p) for p in first["loc"]) or "<root>"
        return cls(f"Malformed {what} at {location}: {first['msg']}", errors)


class ParamKindError(TypeError):
    """A value shape was checked against a different kind's rules."""

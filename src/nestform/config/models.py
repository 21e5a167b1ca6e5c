"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nestform.toml only contains
overrides.  The module-level constants are the tables a deployment retunes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_LOCALE = "ja"


class ComponentBounds(BaseModel):
    """Inclusive numeric bounds for one scalar component."""

    model_config = {"frozen": True}

    min: int
    max: int

    @model_validator(mode="after")
    def _ordered(self) -> ComponentBounds:
        if self.min > self.max:
            msg = f"min ({self.min}) must not exceed max ({self.max})"
            raise ValueError(msg)
        return self


class DateBoundsConfig(BaseModel):
    """[bounds] section."""

    model_config = {"frozen": True}

    year: ComponentBounds = Field(default_factory=lambda: ComponentBounds(min=1900, max=2100))
    month: ComponentBounds = Field(default_factory=lambda: ComponentBounds(min=1, max=12))
    day: ComponentBounds = Field(default_factory=lambda: ComponentBounds(min=1, max=31))

    def for_component(self, name: str) -> ComponentBounds:
        """Return the bounds for ``"year"``, ``"month"`` or ``"day"``."""
        bounds: ComponentBounds = getattr(self, name)
        return bounds


class RangeConfig(BaseModel):
    """[range] section: maximum span per range kind."""

    model_config = {"frozen": True}

    date_max_years: int = Field(default=1, ge=0)
    month_max_months: int = Field(default=12, ge=0)
    year_max_years: int = Field(default=1, ge=0)


class ValidationConfig(BaseModel):
    """Everything the validation core reads besides the document itself."""

    model_config = {"frozen": True}

    locale: str = DEFAULT_LOCALE
    bounds: DateBoundsConfig = Field(default_factory=DateBoundsConfig)
    range: RangeConfig = Field(default_factory=RangeConfig)


DATE_BOUNDS = DateBoundsConfig()
RANGE_LIMITS = RangeConfig()

"""Engine settings with Pydantic validation.

Settings are stored as JSON and validated using Pydantic models.
"""

from pydantic import BaseModel, Field, field_validator

DEFAULT_PALETTE = [
    "#667eea",
    "#764ba2",
    "#f093fb",
    "#4facfe",
    "#43e97b",
    "#fa709a",
    "#fee140",
    "#30cfd0",
    "#a8edea",
    "#fed6e3",
    "#ff6b6b",
    "#4ecdc4",
]


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    model_config = {"validate_assignment": True}


class ChartSettings(BaseModel):
    """Chart series configuration.

    The palette is cycled by position when colouring category slices.
    """

    daily_window_days: int = Field(default=30, ge=1, le=366)
    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)
    currency_symbol: str = Field(default="$", max_length=3)

    model_config = {"validate_assignment": True}

    @field_validator("palette")
    @classmethod
    def _check_hex_colors(cls, value: list[str]) -> list[str]:
        for color in value:
            if not color.startswith("#") or len(color) != 7:
                raise ValueError("Color must be in hex format (#RRGGBB)")
        return value


class FilterSettings(BaseModel):
    """List filter behaviour.

    When ``strict`` is False, a bad date falls back to no date restriction
    and a bad type/category name falls back to no constraint.
    """

    strict: bool = False

    model_config = {"validate_assignment": True}


class AppSettings(BaseModel):
    """Application settings with validation.

    Example:
        >>> settings = AppSettings()
        >>> settings.charts.daily_window_days = 14
        >>> settings.filters.strict = True
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    charts: ChartSettings = Field(default_factory=ChartSettings)
    filters: FilterSettings = Field(default_factory=FilterSettings)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid",
    }

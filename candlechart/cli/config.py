"""Configuration file support for the candlechart CLI.

Settings are read from ``~/.config/candlechart/config.toml``::

    [chart]
    name = "BTC-USD"

    [colors]
    bull = "#34d058"
    bear = "#ea4a5a"
    volume_bull = "#34d058"
    volume_bear = "#ea4a5a"

    [volume]
    enabled = true
    height = 5
    fill = "┃"

    [info_bar]
    enabled = true
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "candlechart" / "config.toml"


def parse_hex_color(value: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (or ``rrggbb``) into an RGB tuple.

    Raises:
        ValueError: If the value is not a 6-digit hex color.
    """
    digits = value.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Invalid color '{value}': expected #rrggbb")
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError:
        raise ValueError(f"Invalid color '{value}': expected #rrggbb") from None


class ChartSettings(BaseModel):
    """Chart options gathered from the config file and the command line."""

    name: Optional[str] = Field(default=None, description="Chart name in the info bar")
    bull_color: Optional[str] = Field(default=None, description="Bullish candle color")
    bear_color: Optional[str] = Field(default=None, description="Bearish candle color")
    volume_bull_color: Optional[str] = Field(default=None, description="Bullish volume color")
    volume_bear_color: Optional[str] = Field(default=None, description="Bearish volume color")
    volume_enabled: bool = Field(default=True, description="Show the volume pane")
    volume_height: Optional[int] = Field(default=None, ge=0, description="Volume pane rows")
    volume_fill: Optional[str] = Field(
        default=None, min_length=1, max_length=1, description="Volume bar character"
    )
    info_bar_enabled: bool = Field(default=True, description="Show the info bar")

    model_config = {"frozen": True}

    @field_validator("bull_color", "bear_color", "volume_bull_color", "volume_bear_color")
    @classmethod
    def _check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            parse_hex_color(value)
        return value

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "ChartSettings":
        """Build settings from a parsed TOML document."""
        config = config or {}
        chart = config.get("chart", {})
        colors = config.get("colors", {})
        volume = config.get("volume", {})
        info_bar = config.get("info_bar", {})

        return cls(
            name=chart.get("name"),
            bull_color=colors.get("bull"),
            bear_color=colors.get("bear"),
            volume_bull_color=colors.get("volume_bull"),
            volume_bear_color=colors.get("volume_bear"),
            volume_enabled=volume.get("enabled", True),
            volume_height=volume.get("height"),
            volume_fill=volume.get("fill"),
            info_bar_enabled=info_bar.get("enabled", True),
        )

    def merged(self, **overrides) -> "ChartSettings":
        """Return a copy where every non-None override replaces the stored value."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **updates})


def _get_config(config_path: Path = CONFIG_PATH) -> Optional[dict]:
    """Lazily load configuration.

    Returns:
        Config dict or None if missing or unreadable.
    """
    import toml

    if not config_path.exists():
        return None

    try:
        return toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return None


def load_settings(config_path: Path = CONFIG_PATH) -> ChartSettings:
    """Load chart settings, falling back to defaults on invalid files."""
    try:
        return ChartSettings.from_config(_get_config(config_path))
    except ValidationError as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return ChartSettings()

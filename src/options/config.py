from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from errors import ConfigError
from patching.cowfile import DEFAULT_TEMP_SUFFIX

CONFIG_FILENAME = "dab.toml"


class DabConfig(BaseModel):
    """Per-project defaults for module creation."""

    model_config = ConfigDict(extra="forbid")

    public: bool = Field(
        default=False,
        description="Declare new modules as `pub mod` (same as --public)",
    )
    after_header: bool = Field(
        default=False,
        description="Insert declarations below the leading comment header (same as --cskip)",
    )
    flat: bool = Field(
        default=False,
        description="Create `<module>.rs` instead of `<module>/mod.rs` (same as --fskip)",
    )
    cleanup_temp_on_failure: bool = Field(
        default=False,
        description="Remove the temporary root file copy when patching fails",
    )
    temp_suffix: str = Field(
        default=DEFAULT_TEMP_SUFFIX,
        description="Marker appended to the root file name for the temporary copy",
    )

    @field_validator("temp_suffix")
    @classmethod
    def validate_temp_suffix(cls, v: str) -> str:
        """Keep the temporary copy a sibling of the root file."""
        if not v:
            msg = "temp_suffix must be non-empty"
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = "temp_suffix must not contain path separators"
            raise ValueError(msg)
        return v


def load_config(root: Path) -> DabConfig:
    """Load configuration from dab.toml if it exists."""
    config_path = root / CONFIG_FILENAME

    if not config_path.is_file():
        return DabConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DabConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e

"""simcore.core.config

Two config surfaces only:
1) `config/default.yaml` + `config/presets/*.yaml`
2) Environment variables (`VASIM_` prefix, `__` for nesting)

Everything else is derived.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from simcore.core.exceptions import ConfigError


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


class SimulationConfig(BaseModel):
    """Backtest loop shape and indicator parameters."""

    bar_count: int = 250
    start_index: int = 35
    warmup: int = 30

    fast_period: int = 10
    slow_period: int = 30
    rsi_period: int = 14
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0
    breakout_lookback: int = 20
    breakout_buffer: float = 0.001
    mean_revert_threshold_pct: float = 2.0

    # one bar ~ one trading day
    periods_per_year: int = 252

    @field_validator("bar_count", "fast_period", "slow_period", "rsi_period", "breakout_lookback")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be >= 1")
        return v

    @model_validator(mode="after")
    def loop_fits_series(self) -> SimulationConfig:
        if self.fast_period >= self.slow_period:
            raise ValueError("fast_period must be < slow_period")
        if self.start_index < self.warmup:
            raise ValueError("start_index must be >= warmup")
        if self.start_index >= self.bar_count:
            raise ValueError("bar_count must exceed start_index")
        return self


class StrategyDefaults(BaseModel):
    """Defaults applied when a caller omits strategy fields."""

    entry_condition: Literal["sma_cross", "rsi_oversold", "breakout", "mean_revert"] = "sma_cross"
    stop_loss_pct: float = Field(default=2.0, ge=0.1, le=50.0)
    take_profit_pct: float = Field(default=4.0, ge=0.1, le=100.0)
    position_size_pct: float = Field(default=10.0, ge=1.0, le=100.0)
    starting_capital: float = Field(default=100_000.0, ge=1000.0)


class ExecutionConfig(BaseModel):
    margin_rate: float = Field(default=0.10, gt=0.0, le=1.0)
    min_quantity: float = Field(default=0.01, gt=0.0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = False


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 5050
    cors_origins: list[str] = []


class Config(BaseSettings):
    """Root configuration. Single source of truth.

    Precedence: `VASIM_*` env > YAML (default + preset) > field defaults.
    """

    preset: Literal["conservative", "balanced", "aggressive", "custom"] = "balanced"

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    strategy: StrategyDefaults = Field(default_factory=StrategyDefaults)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    model_config = {"env_prefix": "VASIM_", "env_nested_delimiter": "__"}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML values arrive as init kwargs; env must still win over them.
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {path}") from e

        preset_name = raw.get("preset", "balanced")
        preset_path = path.parent / "presets" / f"{preset_name}.yaml"
        if preset_path.exists():
            preset_data = yaml.safe_load(preset_path.read_text()) or {}
            raw = _deep_merge(preset_data, raw)

        return cls(**raw)

    @classmethod
    def from_repo_defaults(cls, repo_root: Path | None = None) -> Config:
        root = repo_root or Path.cwd()
        return cls.from_yaml(root / "config" / "default.yaml")

    @classmethod
    def from_preset(
        cls,
        preset: Literal["conservative", "balanced", "aggressive"],
        *,
        repo_root: Path | None = None,
    ) -> Config:
        root = repo_root or Path.cwd()
        default_path = root / "config" / "default.yaml"
        if not default_path.exists():
            raise ConfigError(f"Config file not found: {default_path}")
        raw = yaml.safe_load(default_path.read_text()) or {}
        raw["preset"] = preset
        preset_path = default_path.parent / "presets" / f"{preset}.yaml"
        if not preset_path.exists():
            raise ConfigError(f"Preset not found: {preset_path}")
        preset_data = yaml.safe_load(preset_path.read_text()) or {}
        raw = _deep_merge(preset_data, raw)
        return cls(**raw)

    @classmethod
    def load(cls, repo_root: Path | None = None) -> Config:
        """`config/user.yaml` if present, else repo defaults, else built-in defaults."""

        root = repo_root or Path.cwd()
        user_path = root / "config" / "user.yaml"
        if user_path.exists():
            return cls.from_yaml(user_path)
        default_path = root / "config" / "default.yaml"
        if default_path.exists():
            return cls.from_yaml(default_path)
        return cls()

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from expandvars import UnboundVariable, expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExpectationsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    max_formatted_output_length: int | None = Field(
        200,
        description="Maximum length of object representations in messages; null disables truncation",
    )
    warn_on_invalid_message: bool = Field(
        True,
        description="Log a warning when a custom failure message is neither a string nor a callable",
    )
    log_file: str | None = Field(
        None, description="Debug log file; relative paths resolve against the config file"
    )
    verbose: bool = Field(False, description="Also write debug output to stderr")

    @field_validator("max_formatted_output_length")
    @classmethod
    def length_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_formatted_output_length must be positive")
        return v


_configuration = ExpectationsConfig()


def configuration() -> ExpectationsConfig:
    """Return the active configuration."""
    return _configuration


def configure(config: ExpectationsConfig | None = None, **overrides: Any) -> ExpectationsConfig:
    """Replace the active configuration.

    ``overrides`` are applied on top of ``config`` (or of the current
    configuration when ``config`` is None) and validated by the model.
    Debug log handlers follow ``log_file`` and ``verbose``.
    """
    base = config if config is not None else _configuration
    return _activate(ExpectationsConfig(**{**base.model_dump(), **overrides}))


def reset_configuration() -> ExpectationsConfig:
    return _activate(ExpectationsConfig())


def _activate(config: ExpectationsConfig) -> ExpectationsConfig:
    global _configuration
    previous = _configuration
    _configuration = config
    if (config.log_file, config.verbose) != (previous.log_file, previous.verbose):
        configure_logging(config)
    return _configuration


def _expand_strings(obj: Any, missing: list[str], key: str = "") -> Any:
    if isinstance(obj, str):
        try:
            return expandvars(obj, nounset=True)
        except UnboundVariable:
            missing.append(f"  {key}={obj}")
            return obj
    if isinstance(obj, dict):
        return {k: _expand_strings(v, missing, str(k)) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_strings(v, missing, key) for v in obj]
    return obj


def load_config(path: Path) -> ExpectationsConfig:
    """Load and validate an expectations config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping of settings")

    missing: list[str] = []
    raw = _expand_strings(raw, missing)
    if missing:
        details = "\n".join(missing)
        raise ValueError(f"Config {path} has missing environment variables:\n{details}")

    config = ExpectationsConfig(**raw)

    # Resolve relative log paths relative to config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config


def configure_logging(config: ExpectationsConfig) -> logging.Logger | None:
    """Attach the debug log handlers described by ``config``.

    Without a ``log_file`` the handlers installed by a previous call are
    removed.
    """
    from expectkit.verbose import setup_logger, teardown_logger

    if config.log_file is None:
        teardown_logger()
        return None
    return setup_logger(Path(config.log_file), verbose=config.verbose)

from __future__ import annotations

import re
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

_TARGET_RE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


def validate_target(target: str) -> str:
    if not _TARGET_RE.match(target):
        raise ValueError(
            f"Invalid suite reference '{target}': expected 'module:attribute'"
        )
    return target


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    suites: list[str] = []
    trace: bool = False
    verbose: bool = False
    debug_log: str | None = None

    @field_validator("suites")
    @classmethod
    def suites_must_be_references(cls, v: list[str]) -> list[str]:
        return [validate_target(t) for t in v]

    @field_validator("debug_log")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_log has unresolved variables: {v} ({e})")


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = RunConfig(**raw)

    # Resolve a relative debug_log path relative to config file location
    if config.debug_log is not None:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config

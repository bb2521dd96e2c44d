"""Loading and validation of the YAML configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

DIFF_MODES = frozenset({"none", "uniq", "fuzzy"})
DEFAULT_DIFF_MODE = "uniq"


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is invalid."""


@dataclass
class Source:
    """A single log source: a command to run or a file to tail."""

    name: str = ""
    command: str = ""
    args: list[str] = field(default_factory=list)
    file: str = ""


@dataclass
class ThrottleConfig:
    """Optional throttle settings."""

    lines_per_sec: int = 0


@dataclass
class Config:
    """Top-level configuration."""

    sources: list[Source] = field(default_factory=list)
    diff_mode: str = ""
    throttle: ThrottleConfig = field(default_factory=ThrottleConfig)


def load(path: str | PathLike[str]) -> Config:
    """Read, parse and validate the configuration at path."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"config: read {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"config: parse: {exc}") from exc
    cfg = _build(data)
    _validate(cfg)
    return cfg


def _mapping(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"config: parse: {where} must be a mapping")
    return value


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"config: parse: {where} must be a string")


def _integer(value: Any, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"config: parse: {where} must be an integer")
    return value


def _build(data: Any) -> Config:
    top = _mapping(data, "document")
    raw_sources = top.get("sources") or []
    if not isinstance(raw_sources, list):
        raise ConfigError("config: parse: sources must be a list")
    sources = []
    for index, item in enumerate(raw_sources):
        entry = _mapping(item, f"sources[{index}]")
        raw_args = entry.get("args") or []
        if not isinstance(raw_args, list):
            raise ConfigError(f"config: parse: sources[{index}].args must be a list")
        sources.append(
            Source(
                name=_string(entry.get("name"), f"sources[{index}].name"),
                command=_string(entry.get("command"), f"sources[{index}].command"),
                args=[_string(a, f"sources[{index}].args") for a in raw_args],
                file=_string(entry.get("file"), f"sources[{index}].file"),
            )
        )
    throttle = _mapping(top.get("throttle"), "throttle")
    return Config(
        sources=sources,
        diff_mode=_string(top.get("diff_mode"), "diff_mode"),
        throttle=ThrottleConfig(
            lines_per_sec=_integer(throttle.get("lines_per_sec"), "throttle.lines_per_sec")
        ),
    )


def _validate(cfg: Config) -> None:
    if not cfg.sources:
        raise ConfigError("config: at least one source is required")
    seen: set[str] = set()
    for index, source in enumerate(cfg.sources):
        if not source.name:
            raise ConfigError(f"config: source[{index}]: name is required")
        if not source.command and not source.file:
            raise ConfigError(f"config: source {source.name!r}: command or file is required")
        if source.name in seen:
            raise ConfigError(f"config: duplicate source name {source.name!r}")
        seen.add(source.name)
    if not cfg.diff_mode:
        cfg.diff_mode = DEFAULT_DIFF_MODE
    if cfg.diff_mode not in DIFF_MODES:
        raise ConfigError(f"config: unknown diff_mode {cfg.diff_mode!r}")
    if cfg.throttle.lines_per_sec < 0:
        raise ConfigError("config: throttle.lines_per_sec must be >= 0")
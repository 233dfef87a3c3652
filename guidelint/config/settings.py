"""Pydantic-based configuration model and YAML loader for GuideLint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


__all__ = ["ConfigError", "RulesConfig", "GuideLintSettings", "load_settings"]

logger = logging.getLogger(__name__)

_CONFIG_FILE_NAMES: list[str] = [
    "guidelint.yaml",
    "guidelint.yml",
    ".guidelint.yaml",
    ".guidelint.yml",
]


class ConfigError(Exception):
    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" ({path})" if path is not None else ""
        super().__init__(f"invalid configuration{where}: {reason}")


class RulesConfig(BaseModel):
    """Per-rule toggles and thresholds."""

    disabled: list[str] = Field(
        default_factory=list,
        description="Rule ids that are not evaluated.",
    )
    max_try_statements: int = Field(
        default=2,
        ge=1,
        description="Maximum top-level statements allowed inside a try block.",
    )
    max_if_depth: int = Field(
        default=2,
        ge=1,
        description="Maximum nesting of if/else blocks within one function.",
    )
    comment_similarity: float = Field(
        default=0.75,
        gt=0.0,
        le=1.0,
        description="Share of a comment's words that must appear in the next line to call it redundant.",
    )
    allowed_identifiers: list[str] = Field(
        default_factory=list,
        description="Identifiers exempt from the camelCase check.",
    )


class GuideLintSettings(BaseModel):
    """Top-level GuideLint configuration."""

    extensions: list[str] = Field(
        default_factory=lambda: [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"],
        description="File suffixes collected when a directory is given.",
    )
    exclude: list[str] = Field(
        default_factory=lambda: ["node_modules", "dist", "build", "coverage", ".git"],
        description="Directory names skipped while walking directories.",
    )
    jobs: Optional[int] = Field(
        default=None,
        ge=1,
        description="Worker threads used to check files; defaults to the CPU count.",
    )
    output_format: Literal["text", "rich", "json"] = Field(
        default="text",
        description="Report format: text, rich or json.",
    )
    rules: RulesConfig = Field(
        default_factory=RulesConfig,
        description="Per-rule configuration.",
    )


def _find_config_file(search_dir: Path) -> Path | None:
    """Walk up from *search_dir* looking for a config file."""
    current = search_dir.resolve()
    while True:
        for name in _CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(path, str(exc)) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(path, "top level must be a mapping")
    return raw


def load_settings(
    config_path: Path | None = None,
    search_dir: Path | None = None,
) -> GuideLintSettings:
    """Load settings from a YAML file, falling back to defaults."""
    raw: dict[str, Any] = {}
    source: Path | None = None

    if config_path is not None:
        source = Path(config_path).resolve()
        if not source.is_file():
            raise ConfigError(source, "file not found")
    else:
        source = _find_config_file(search_dir or Path.cwd())

    if source is not None:
        raw = _read_yaml(source)
        logger.debug("Loaded settings from %s", source)

    try:
        return GuideLintSettings(**raw)
    except ValidationError as exc:
        raise ConfigError(source, str(exc)) from exc

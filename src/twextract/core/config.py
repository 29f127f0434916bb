#!/usr/bin/env python3
"""Extractor configuration: immutable settings, a builder and a JSONC file loader."""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

INDEX_UNITS = ("codepoint", "utf16", "utf8")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(Exception):
    """Raised when the extractor cannot be set up safely (bad config or pattern catalog)."""
    pass


@dataclass(frozen=True)
class ExtractorConfig:
    """
    Settings for one extraction session.

    Attributes:
        allow_url_without_protocol: Extract bare domains such as ``example.com``.
        index_unit: Unit of reported spans: ``codepoint``, ``utf16`` or ``utf8``.
    """

    allow_url_without_protocol: bool = True
    index_unit: str = "codepoint"

    def __post_init__(self) -> None:
        if not isinstance(self.allow_url_without_protocol, bool):
            raise ConfigurationError(
                f"allow_url_without_protocol must be a bool, got {self.allow_url_without_protocol!r}"
            )
        if self.index_unit not in INDEX_UNITS:
            raise ConfigurationError(
                f"index_unit must be one of {', '.join(INDEX_UNITS)}, got {self.index_unit!r}"
            )

    def evolve(self, **changes: Any) -> ExtractorConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def builder(cls) -> ExtractorConfigBuilder:
        return ExtractorConfigBuilder()


class ExtractorConfigBuilder:
    """Step-by-step construction of an ExtractorConfig."""

    def __init__(self, base: ExtractorConfig | None = None) -> None:
        base = base or ExtractorConfig()
        self._allow_url_without_protocol = base.allow_url_without_protocol
        self._index_unit = base.index_unit

    def allow_url_without_protocol(self, flag: bool = True) -> ExtractorConfigBuilder:
        self._allow_url_without_protocol = bool(flag)
        return self

    def index_unit(self, unit: str) -> ExtractorConfigBuilder:
        self._index_unit = unit
        return self

    def build(self) -> ExtractorConfig:
        return ExtractorConfig(
            allow_url_without_protocol=self._allow_url_without_protocol,
            index_unit=self._index_unit,
        )


class ConfigLoader:
    """Load configuration from a JSON file that may contain // comments."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self.config_file = str(config_path) if config_path is not None else None
        self._config: dict[str, Any] = {}

        if config_path is None:
            config_path = self._find_config_file()
            if config_path is None:
                return
            self.config_file = str(config_path)

        try:
            with open(config_path, encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

        # Remove single-line comments (// ...) that are not inside a URL scheme
        content = re.sub(r"(?<!:)//.*$", "", content, flags=re.MULTILINE)

        try:
            self._config = json.loads(content) if content.strip() else {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(self._config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

    def _find_config_file(self) -> Path | None:
        """Find a config file via TWEXTRACT_CONFIG or the current working directory."""
        env_path = os.environ.get("TWEXTRACT_CONFIG")
        if env_path:
            return Path(env_path)

        for filename in ["twextract.jsonc", "twextract.json"]:
            config_path = Path.cwd() / filename
            if config_path.exists():
                return config_path
        return None

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'extractor.index_unit')"""
        value: Any = self._config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def __getitem__(self, key: str) -> Any:
        return self._config[key]

    @property
    def allow_url_without_protocol(self) -> bool:
        env_value = os.environ.get("TWEXTRACT_ALLOW_URL_WITHOUT_PROTOCOL")
        if env_value is not None:
            return _parse_bool(env_value, "TWEXTRACT_ALLOW_URL_WITHOUT_PROTOCOL")
        value = self.get("extractor.allow_url_without_protocol", True)
        if isinstance(value, str):
            return _parse_bool(value, "extractor.allow_url_without_protocol")
        return bool(value)

    @property
    def index_unit(self) -> str:
        return str(os.environ.get("TWEXTRACT_INDEX_UNIT") or self.get("extractor.index_unit", "codepoint")).lower()

    def extractor_config(self) -> ExtractorConfig:
        """Build the immutable extractor settings from file and environment."""
        return ExtractorConfig(
            allow_url_without_protocol=self.allow_url_without_protocol,
            index_unit=self.index_unit,
        )


def _parse_bool(value: str, source: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{source} must be a boolean, got {value!r}")


def load_config(config_path: str | Path | None = None) -> ExtractorConfig:
    """Load extractor settings from a config file (optional) and the environment."""
    return ConfigLoader(config_path).extractor_config()


def setup_logging(
    module_name: str,
    log_level: str | None = None,
    include_console: bool | None = None,
    include_file: bool | None = None,
) -> logging.LoggerAdapter:
    """
    Get a logger for a twextract module.

    Library modules pass ``include_console=False`` so that importing the
    package never installs console handlers.
    """
    from .logging import get_logger

    return get_logger(
        name=module_name,
        log_level=log_level,
        include_console=include_console,
        include_file=include_file,
    )

"""
Font Responder configuration handling.

Provides YAML configuration loading and validation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import MissingRequiredOptionError

REQUIRED_OPTIONS = ("fonts", "locale_to_url_keys")

DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def check_required(options: Mapping[str, Any], name: str) -> None:
    """Raise MissingRequiredOptionError if ``name`` is absent from ``options``."""
    if options.get(name) is None:
        raise MissingRequiredOptionError(name)


def _as_bool(value: Any) -> bool:
    """Interpret YAML/env style flags; strings like "false" or "0" are False."""
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in ("1", "true", "yes", "on"):
            return True
        if normalized in ("", "0", "false", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean value: {value!r}")
    return bool(value)


@dataclass
class ResponderConfig:
    """
    Font Responder configuration.

    Can be loaded from a YAML file or created programmatically.
    """
    fonts: Dict[str, Any] = field(default_factory=dict)
    locale_to_url_keys: Dict[str, str] = field(default_factory=dict)
    maxage: int = 0  # milliseconds, 0 = no cache headers
    compress: bool = False
    ua: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_file: str = ""
    log_format: str = DEFAULT_LOG_FORMAT
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 3

    @property
    def max_age_seconds(self) -> int:
        return int(self.maxage) // 1000

    @classmethod
    def load(cls, path: str) -> "ResponderConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            ResponderConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid YAML
            MissingRequiredOptionError: If fonts or locale_to_url_keys is missing
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResponderConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ResponderConfig instance

        Raises:
            MissingRequiredOptionError: If fonts or locale_to_url_keys is missing
            ValueError: If maxage is negative or compress is not a boolean
        """
        for name in REQUIRED_OPTIONS:
            check_required(data, name)

        logging_cfg = data.get("logging", {}) or {}

        maxage = int(data.get("maxage") or 0)
        if maxage < 0:
            raise ValueError(f"maxage must be >= 0 milliseconds, got {maxage}")

        return cls(
            fonts=dict(data["fonts"]),
            locale_to_url_keys=dict(data["locale_to_url_keys"]),
            maxage=maxage,
            compress=_as_bool(data.get("compress", False)),
            ua=data.get("ua") or None,
            log_level=logging_cfg.get("level", "INFO"),
            log_file=logging_cfg.get("file", ""),
            log_format=logging_cfg.get("format", DEFAULT_LOG_FORMAT),
            log_max_bytes=logging_cfg.get("max_bytes", 10485760),
            log_backup_count=logging_cfg.get("backup_count", 3),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Configuration as dictionary
        """
        data: Dict[str, Any] = {
            "fonts": self.fonts,
            "locale_to_url_keys": self.locale_to_url_keys,
            "maxage": self.maxage,
            "compress": self.compress,
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
                "format": self.log_format,
                "max_bytes": self.log_max_bytes,
                "backup_count": self.log_backup_count,
            },
        }
        if self.ua:
            data["ua"] = self.ua
        return data

    def save(self, path: str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to save the configuration file
        """
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)

"""Configuration loading for acctestlint."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigNotFoundError, InvalidConfigError, InvalidSchemaVersionError

SCHEMA_VERSION = 1

# Looked up in the working directory unless overridden
CONFIG_FILE = ".acctestlint.json"
CONFIG_ENV_VAR = "ACCTESTLINT_CONFIG"

OUTPUT_FORMATS = ("text", "json")


@dataclass
class LintConfig:
    """Settings for a lint run.

    Attributes:
        exclude: Glob patterns matched against POSIX paths relative to
            each checked directory ("internal/legacy/*", "*_gen_test.go").
        include_vendor: Whether to descend into vendor/ directories.
        format: Output format, "text" or "json".
    """

    exclude: list[str] = field(default_factory=list)
    include_vendor: bool = False
    format: str = "text"

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "exclude": list(self.exclude),
            "include_vendor": self.include_vendor,
            "format": self.format,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "<config>") -> "LintConfig":
        """Build a config from parsed JSON.

        Raises:
            InvalidSchemaVersionError: If schema_version isn't supported.
            InvalidConfigError: If a field has the wrong type or value.
        """
        if not isinstance(data, dict):
            raise InvalidConfigError(source, "top-level value must be an object")

        version = data.get("schema_version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            raise InvalidSchemaVersionError(version, SCHEMA_VERSION)

        exclude = data.get("exclude", [])
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise InvalidConfigError(source, "'exclude' must be a list of strings")

        include_vendor = data.get("include_vendor", False)
        if not isinstance(include_vendor, bool):
            raise InvalidConfigError(source, "'include_vendor' must be true or false")

        fmt = data.get("format", "text")
        if fmt not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                source, f"'format' must be one of {', '.join(OUTPUT_FORMATS)}"
            )

        return cls(exclude=exclude, include_vendor=include_vendor, format=fmt)


def load_config(path: str | Path | None = None, cwd: Path | None = None) -> LintConfig:
    """
    Load configuration.

    Resolution order: `path` argument, then $ACCTESTLINT_CONFIG, then
    .acctestlint.json in `cwd`. A missing default file yields defaults;
    a missing explicit file is an error.

    Raises:
        ConfigNotFoundError: If an explicitly given file doesn't exist.
        InvalidConfigError: If the file isn't valid JSON or has bad values.
        InvalidSchemaVersionError: If schema version is unsupported.
    """
    explicit = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise ConfigNotFoundError(str(config_path))
    else:
        config_path = (cwd or Path.cwd()) / CONFIG_FILE
        if not config_path.exists():
            return LintConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(str(config_path), f"invalid JSON ({e.msg})") from e

    return LintConfig.from_dict(data, source=str(config_path))

"""
core/config.py
--------------
Centralized configuration for the hkid toolkit.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from hkid.core.formats import Format

logger = logging.getLogger(__name__)


@dataclass
class HKIDConfig:
    """
    Configuration object for generation, rendering and batch scans.

    Attributes:
        output_format:       Layout name used when rendering numbers.
        only_defined_prefix: Restrict generated prefixes to the registry.
        seed:                Seed for a reproducible random source.
        column:              Default column holding HKID numbers in a scan.
        encoding:            Encoding used when reading CSV files.
    """

    output_format: str = Format.COMPLETE.label
    only_defined_prefix: bool = True
    seed: Optional[int] = None
    column: str = "hkid"
    encoding: str = "utf-8-sig"

    @property
    def format(self) -> Format:
        return Format.from_name(self.output_format)

    def validate(self) -> None:
        """Validate configuration values are within acceptable ranges."""
        Format.from_name(self.output_format)
        if not isinstance(self.only_defined_prefix, bool):
            raise ValueError(
                f"only_defined_prefix must be a boolean, got {self.only_defined_prefix!r}."
            )
        if not isinstance(self.encoding, str):
            raise ValueError(f"encoding must be a string, got {self.encoding!r}.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding {self.encoding!r}.") from exc
        if not isinstance(self.column, str) or not self.column.strip():
            raise ValueError("column must be a non-empty string.")
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError(f"seed must be an integer, got {self.seed!r}.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HKIDConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("Ignoring unknown configuration key: %s", key)
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.validate()
        return config


def load_config(path: Union[str, Path]) -> HKIDConfig:
    """
    Load an :class:`HKIDConfig` from a YAML file.

    Expected YAML structure::

        version: 1
        hkid:
          output_format: complete
          only_defined_prefix: true
          seed: 42

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError:        If the file is not valid YAML or lacks the
                           ``version`` / ``hkid`` sections.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must be a YAML dictionary.")
    if "version" not in data:
        raise ValueError("Config file missing top-level 'version' key.")
    section = data.get("hkid")
    if not isinstance(section, dict):
        raise ValueError("Config file missing or invalid 'hkid' section.")

    return HKIDConfig.from_dict(section)


# Default config; callers may override by passing their own instance.
DEFAULT_CONFIG = HKIDConfig()

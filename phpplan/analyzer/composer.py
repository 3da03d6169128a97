"""
Loader for composer.json manifests.

Every failure (missing file, bad JSON, unexpected shape) collapses into a
single "not available" result so callers can fall back to their defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .walk import read_text

logger = logging.getLogger(__name__)

COMPOSER_JSON = "composer.json"


@dataclass(frozen=True)
class ComposerJSON:
    """Read-only view over a parsed composer.json."""
    name: str = ""
    require: Optional[Mapping[str, str]] = None

    def get_require(self, name: str) -> Tuple[str, bool]:
        """Return (constraint, True) if `name` is declared in require."""
        if self.require is None or name not in self.require:
            return "", False
        return self.require[name], True


def _parse(text: str) -> Optional[ComposerJSON]:
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.debug(f"composer.json is not valid JSON: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug("composer.json top-level value is not an object")
        return None

    name = data.get("name")
    if name is None:
        name = ""
    if not isinstance(name, str):
        logger.debug("composer.json 'name' is not a string")
        return None

    require = data.get("require")
    if require is not None:
        if not isinstance(require, dict) or not all(isinstance(v, str) for v in require.values()):
            logger.debug("composer.json 'require' is not a map of strings")
            return None
        require = MappingProxyType(dict(require))

    return ComposerJSON(name=name, require=require)


def load_composer_json(source: str | Path) -> Optional[ComposerJSON]:
    """Load <source>/composer.json, or return None if it is not available."""
    path = Path(source) / COMPOSER_JSON
    text = read_text(path)
    if text is None:
        logger.debug(f"composer.json not readable at {path}")
        return None
    return _parse(text)

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Optional

from .composer import ComposerJSON, load_composer_json

logger = logging.getLogger(__name__)


DEFAULT_PHP_VERSION = "8.1"

# one to three dot-separated integers, e.g. "8", "8.2", "8.2.1"
_BARE_VERSION = re.compile(r"[0-9]+(\.[0-9]+){0,2}")

# bump applied to exclusive bounds before formatting
_EXCLUSIVE_STEP = 0.1


def _shift(value: str, delta: float) -> Optional[str]:
    try:
        if "_" in value or value != value.strip() or not value.isascii():
            raise ValueError(f"invalid version number: {value!r}")
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"version number is not finite: {value!r}")
    except ValueError as e:
        logger.warning(f"parse php version error: {e}")
        return None
    return f"{number + delta:f}"


def resolve_version_constraint(constraint: str) -> Optional[str]:
    """
    Pick a concrete version out of a constraint such as ">=7.4 <8.3".

    Atoms are checked left to right and the first usable one wins; no
    attempt is made to reconcile lower and upper bounds. Exclusive bounds
    are nudged by 0.1 and rendered with six decimals ("8.100000").
    Returns None when no atom yields a version.
    """
    if _BARE_VERSION.fullmatch(constraint):
        return constraint

    for atom in constraint.split(" "):
        if atom.startswith(">="):
            return atom[2:]
        elif atom.startswith(">"):
            resolved = _shift(atom[1:], _EXCLUSIVE_STEP)
            if resolved is None:
                continue
            return resolved
        elif atom.startswith("<="):
            return atom[2:]
        elif atom.startswith("<"):
            resolved = _shift(atom[1:], -_EXCLUSIVE_STEP)
            if resolved is None:
                continue
            return resolved

    return None


def php_version_from_composer(composer: Optional[ComposerJSON]) -> str:
    """PHP version for an already loaded manifest, or DEFAULT_PHP_VERSION."""
    if composer is None:
        return DEFAULT_PHP_VERSION

    version_range, ok = composer.get_require("php")
    if not ok or version_range == "":
        return DEFAULT_PHP_VERSION

    resolved = resolve_version_constraint(version_range)
    if resolved is None:
        return DEFAULT_PHP_VERSION
    return resolved


def get_php_version(source: str | Path) -> str:
    """Get the PHP version of the project, falling back to DEFAULT_PHP_VERSION."""
    return php_version_from_composer(load_composer_json(source))

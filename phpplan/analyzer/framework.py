from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .composer import ComposerJSON, load_composer_json
from .spec import PHPFramework

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameworkRule:
    """Maps a Composer package to the framework it identifies."""
    package: str
    framework: PHPFramework

    def matches(self, composer: ComposerJSON) -> bool:
        _, declared = composer.get_require(self.package)
        return declared


# Checked in order; the first declared package wins.
FRAMEWORK_RULES: Tuple[FrameworkRule, ...] = (
    FrameworkRule("laravel/framework", PHPFramework.LARAVEL),
    FrameworkRule("topthink/framework", PHPFramework.THINKPHP),
    FrameworkRule("codeigniter4/framework", PHPFramework.CODEIGNITER),
)


def framework_from_composer(composer: Optional[ComposerJSON]) -> PHPFramework:
    if composer is None:
        return PHPFramework.NONE

    for rule in FRAMEWORK_RULES:
        if rule.matches(composer):
            logger.debug(f"Matched framework {rule.framework.value} via {rule.package}")
            return rule.framework

    return PHPFramework.NONE


def determine_project_framework(source: str | Path) -> PHPFramework:
    """Determine the framework of the project."""
    return framework_from_composer(load_composer_json(source))

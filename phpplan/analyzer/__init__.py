from __future__ import annotations

from pathlib import Path
from typing import Optional

from .spec import PlanMeta, PHPFramework, PHPApplication, PHPProperty
from .heuristics import resolve_plan
from .composer import ComposerJSON, load_composer_json
from .version import get_php_version, php_version_from_composer, DEFAULT_PHP_VERSION
from .framework import determine_project_framework, framework_from_composer
from .apt import determine_apt_dependencies, apt_dependencies_from_composer
from .application import determine_application, application_from_composer


def analyze_repo(app_root: str | Path, server: Optional[str] = "") -> PlanMeta:
    """
    Inspect app_root's composer.json and return a PlanMeta.
    Never raises for a missing or malformed manifest; defaults are used instead.
    """
    return resolve_plan(app_root, server)


__all__ = [
    "analyze_repo",
    "resolve_plan",
    "PlanMeta",
    "PHPFramework",
    "PHPApplication",
    "PHPProperty",
    "ComposerJSON",
    "load_composer_json",
    "get_php_version",
    "php_version_from_composer",
    "DEFAULT_PHP_VERSION",
    "determine_project_framework",
    "framework_from_composer",
    "determine_apt_dependencies",
    "apt_dependencies_from_composer",
    "determine_application",
    "application_from_composer",
]

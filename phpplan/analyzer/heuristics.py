from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .apt import EMBEDDED_SERVER, apt_dependencies_from_composer
from .application import application_from_composer
from .composer import load_composer_json
from .framework import framework_from_composer
from .spec import PHPApplication, PHPFramework, PlanMeta
from .version import php_version_from_composer, resolve_version_constraint
from .walk import find_manifests

logger = logging.getLogger(__name__)


def resolve_plan(app_root: str | Path, server: Optional[str] = "") -> PlanMeta:
    server = (server or "").strip()
    manifests = find_manifests(app_root)

    # one snapshot of composer.json feeds every resolver
    composer = load_composer_json(app_root)
    php_version = php_version_from_composer(composer)
    framework = framework_from_composer(composer)
    dependencies = apt_dependencies_from_composer(composer, server)
    application, prop = application_from_composer(composer)

    rationale: List[str] = []
    constraint, has_php = composer.get_require("php") if composer else ("", False)
    if composer is None:
        rationale.append("composer.json missing or unreadable; using defaults")
    elif not (has_php and constraint):
        rationale.append(f"No require.php declared; defaulting to PHP {php_version}")
    elif resolve_version_constraint(constraint) is None:
        rationale.append(f"require.php '{constraint}' has no usable bound; defaulting to PHP {php_version}")
    else:
        rationale.append(f"PHP {php_version} resolved from require.php '{constraint}'")
    if framework is not PHPFramework.NONE:
        rationale.append(f"Detected {framework.value} via composer require")
    if server == EMBEDDED_SERVER:
        rationale.append(f"Server '{server}' serves HTTP itself; nginx not installed")
    if application is not PHPApplication.DEFAULT:
        rationale.append(f"Known application {application.value} from composer name")

    logger.info(f"Resolved PHP plan for {app_root}: php={php_version} framework={framework.value}")

    return PlanMeta(
        app_path=str(Path(app_root).resolve()),
        php_version=php_version,
        framework=framework,
        dependencies=dependencies,
        application=application,
        property=prop,
        server=server,
        manifests=manifests,
        rationale=rationale,
    )

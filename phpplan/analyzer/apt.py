from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .composer import ComposerJSON, load_composer_json


# Octane server that serves HTTP itself and needs no nginx in front.
EMBEDDED_SERVER = "swoole"

WEB_SERVER_PACKAGE = "nginx"

BASE_DEPENDENCIES: Tuple[str, ...] = ("libicu-dev", "jq", "pkg-config", "unzip", "git")

DEPENDENCY_PACKAGES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "ext-openssl": ("libssl-dev",),
    "ext-zip": ("libzip-dev",),
    "ext-curl": ("libcurl4-openssl-dev", "libssl-dev"),
    "ext-gd": ("libpng-dev",),
    "ext-gmp": ("libgmp-dev",),
})


def apt_dependencies_from_composer(composer: Optional[ComposerJSON], server: Optional[str] = "") -> List[str]:
    """
    Determine the apt packages needed to build and run the project.

    nginx is installed unless the server is "swoole". Packages coming from
    the Composer requirements are appended in declaration order and are not
    deduplicated.
    """
    dependencies = list(BASE_DEPENDENCIES)

    # TODO: RoadRunner also serves HTTP itself and could skip nginx
    if server != EMBEDDED_SERVER:
        dependencies.append(WEB_SERVER_PACKAGE)

    if composer is None or composer.require is None:
        return dependencies

    for dep in composer.require:
        packages = DEPENDENCY_PACKAGES.get(dep)
        if packages:
            dependencies.extend(packages)

    return dependencies


def determine_apt_dependencies(source: str | Path, server: Optional[str] = "") -> List[str]:
    return apt_dependencies_from_composer(load_composer_json(source), server)

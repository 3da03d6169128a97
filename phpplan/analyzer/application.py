from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from .composer import ComposerJSON, load_composer_json
from .spec import PHPApplication, PHPProperty


ACG_FAKA_PACKAGE = "lizhipay/acg-faka"


def application_from_composer(composer: Optional[ComposerJSON]) -> Tuple[PHPApplication, PHPProperty]:
    """
    Determine which known application the project is, so custom fixes
    (such as its nginx configuration) can be applied.
    """
    if composer is None:
        return PHPApplication.DEFAULT, PHPProperty.NONE

    if composer.name == ACG_FAKA_PACKAGE:
        return PHPApplication.ACG_FAKA, PHPProperty.COMPOSER

    return PHPApplication.DEFAULT, PHPProperty.COMPOSER


def determine_application(source: str | Path) -> Tuple[PHPApplication, PHPProperty]:
    return application_from_composer(load_composer_json(source))

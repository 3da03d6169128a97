from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class PHPFramework(Enum):
    """Web framework a project is built on."""
    NONE = "none"
    LARAVEL = "laravel"
    THINKPHP = "thinkphp"
    CODEIGNITER = "codeigniter"


class PHPApplication(Enum):
    """Well-known applications that need custom handling (e.g. nginx config)."""
    DEFAULT = "default"
    ACG_FAKA = "acg-faka"


class PHPProperty(Enum):
    """Which manifest the application classification was derived from."""
    NONE = "none"
    COMPOSER = "composer"


@dataclass
class PlanMeta:
    # Core identity
    app_path: str
    php_version: str
    framework: PHPFramework

    # Build inputs
    dependencies: List[str]
    application: PHPApplication
    property: PHPProperty
    server: str

    # Raw manifests found at the root (name -> path)
    manifests: Dict[str, str] = field(default_factory=dict)
    rationale: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, str]:
        """Flat string map handed to the template renderer."""
        return {
            "phpVersion": self.php_version,
            "framework": self.framework.value,
            "deps": " ".join(self.dependencies),
            "app": self.application.value,
            "property": self.property.value,
            "server": self.server,
        }

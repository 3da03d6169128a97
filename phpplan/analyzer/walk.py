from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional


MANIFEST_NAMES = [
    "composer.json",
    "composer.lock",
]


def read_text(path: str | Path) -> Optional[str]:
    """Return the file contents, or None when missing or unreadable."""
    p = Path(path)
    if not p.is_file():
        return None

    for enc in ("utf-8-sig", "latin-1"):
        try:
            with open(p, "r", encoding=enc) as f:
                return f.read()
        except UnicodeDecodeError:
            continue
        except OSError:
            return None
    return None


def find_manifests(root: str | Path) -> Dict[str, str]:
    root_path = Path(root)
    found: Dict[str, str] = {}
    for name in MANIFEST_NAMES:
        p = root_path / name
        if p.is_file():
            found[name] = str(p)
    return found

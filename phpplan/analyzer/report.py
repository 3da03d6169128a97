from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .spec import PlanMeta


REPORT_FORMATS = ("json", "yaml")


def plan_as_dict(plan: PlanMeta) -> Dict[str, Any]:
    return {
        "app_path": plan.app_path,
        "php_version": plan.php_version,
        "framework": plan.framework.value,
        "dependencies": list(plan.dependencies),
        "application": plan.application.value,
        "property": plan.property.value,
        "server": plan.server,
        "manifests": dict(plan.manifests),
        "rationale": list(plan.rationale),
        "meta": plan.to_dict(),
    }


def render_summary(plan: PlanMeta) -> str:
    lines = []
    lines.append(f"App path: {plan.app_path}")
    lines.append(f"PHP version: {plan.php_version}")
    lines.append(f"Framework: {plan.framework.value}")
    lines.append(f"Application: {plan.application.value} (from {plan.property.value})")
    lines.append(f"Server: {plan.server or '(default)'}")
    lines.append("")
    lines.append("Apt dependencies:")
    for dep in plan.dependencies:
        lines.append(f"- {dep}")
    lines.append("")
    if plan.rationale:
        lines.append("Rationale:")
        for r in plan.rationale:
            lines.append(f"- {r}")
        lines.append("")
    lines.append("Manifests:")
    for k, v in plan.manifests.items():
        lines.append(f"- {k}: {v}")
    return "\n".join(lines)


def emit_report(plan: PlanMeta, dest_path: str | Path, fmt: str = "json") -> Path:
    """Write the plan (json or yaml) and an analysis.md summary into dest_path."""
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"unsupported report format '{fmt}', expected one of {', '.join(REPORT_FORMATS)}")

    dest = Path(dest_path)
    dest.mkdir(parents=True, exist_ok=True)

    data = plan_as_dict(plan)
    plan_file = dest / f"php_plan.{fmt}"
    with open(plan_file, "w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)

    with open(dest / "analysis.md", "w", encoding="utf-8") as f:
        f.write(render_summary(plan))

    return plan_file

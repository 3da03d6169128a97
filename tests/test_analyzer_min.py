import json
import tempfile
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from phpplan.analyzer import analyze_repo
from phpplan.analyzer.report import emit_report
from phpplan.analyzer.spec import PHPApplication, PHPFramework, PHPProperty
from phpplan.cli import main


LARAVEL_COMPOSER = {
    "name": "acme/shop",
    "require": {"php": "^8.1 >=8.2", "laravel/framework": "^10.0", "ext-gd": "*"},
}


def write_composer(root, data):
    (Path(root) / "composer.json").write_text(json.dumps(data))


def test_analyzer_laravel_plan():
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, LARAVEL_COMPOSER)
        plan = analyze_repo(td)
        assert plan.php_version == "8.2"
        assert plan.framework is PHPFramework.LARAVEL
        assert plan.dependencies[-1] == "libpng-dev"
        assert "nginx" in plan.dependencies
        assert plan.application is PHPApplication.DEFAULT
        assert plan.property is PHPProperty.COMPOSER
        assert "composer.json" in plan.manifests
        assert any("laravel" in r for r in plan.rationale)
        meta = plan.to_dict()
        assert meta["phpVersion"] == "8.2"
        assert meta["framework"] == "laravel"
        assert meta["deps"] == " ".join(plan.dependencies)
        assert meta["server"] == ""


def test_analyzer_empty_dir_uses_defaults():
    with tempfile.TemporaryDirectory() as td:
        plan = analyze_repo(td, server=" swoole ")
        assert plan.php_version == "8.1"
        assert plan.framework is PHPFramework.NONE
        assert plan.server == "swoole"
        assert "nginx" not in plan.dependencies
        assert (plan.application, plan.property) == (PHPApplication.DEFAULT, PHPProperty.NONE)
        assert plan.manifests == {}


def test_emit_report_json_and_yaml():
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, LARAVEL_COMPOSER)
        plan = analyze_repo(td)
        out = Path(td) / "out"

        json_file = emit_report(plan, out)
        data = json.loads(json_file.read_text())
        assert data["framework"] == "laravel"
        assert data["meta"]["phpVersion"] == "8.2"
        assert "PHP version: 8.2" in (out / "analysis.md").read_text()

        yaml_file = emit_report(plan, out, "yaml")
        assert yaml.safe_load(yaml_file.read_text())["dependencies"] == plan.dependencies


def test_emit_report_rejects_unknown_format():
    with tempfile.TemporaryDirectory() as td:
        plan = analyze_repo(td)
        with pytest.raises(ValueError, match="toml"):
            emit_report(plan, td, "toml")


def test_cli_plan_json():
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, {"name": "lizhipay/acg-faka", "require": {"php": ">7.4"}})
        runner = CliRunner()
        result = runner.invoke(main, ["plan", td, "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["php_version"] == "7.500000"
        assert data["application"] == "acg-faka"


def test_cli_server_from_env():
    with tempfile.TemporaryDirectory() as td:
        runner = CliRunner()
        result = runner.invoke(main, ["plan", td, "--json"], env={"PHPPLAN_SERVER": "swoole"})
        assert result.exit_code == 0, result.output
        assert "nginx" not in json.loads(result.output)["dependencies"]


def test_cli_report_writes_files():
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, LARAVEL_COMPOSER)
        dest = Path(td) / "report"
        runner = CliRunner()
        result = runner.invoke(main, ["report", td, str(dest), "--format", "yaml"])
        assert result.exit_code == 0, result.output
        assert (dest / "php_plan.yaml").exists()
        assert (dest / "analysis.md").exists()


def test_cli_rejects_bad_log_level():
    with tempfile.TemporaryDirectory() as td:
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "chatty", "plan", td])
        assert result.exit_code != 0


def test_analyzer_reads_manifest_once(monkeypatch):
    import phpplan.analyzer.composer as composer_module

    calls = []
    original = composer_module.read_text

    def counting_read_text(path):
        calls.append(path)
        return original(path)

    monkeypatch.setattr(composer_module, "read_text", counting_read_text)
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, LARAVEL_COMPOSER)
        analyze_repo(td)
    assert len(calls) == 1


def test_rationale_for_unusable_constraint():
    with tempfile.TemporaryDirectory() as td:
        write_composer(td, {"require": {"php": "^8.2"}})
        plan = analyze_repo(td)
        assert plan.php_version == "8.1"
        assert any("no usable bound" in r for r in plan.rationale)
        assert not any("resolved from require.php" in r for r in plan.rationale)


def test_report_summary_is_utf8():
    with tempfile.TemporaryDirectory() as td:
        app = Path(td) / "café"
        app.mkdir()
        plan = analyze_repo(app)
        emit_report(plan, Path(td) / "out")
        summary = (Path(td) / "out" / "analysis.md").read_text(encoding="utf-8")
        assert "café" in summary

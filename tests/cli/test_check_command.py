import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from extlint.cli.main import main


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path):
    home = tmp_path / "home"
    home.mkdir()
    with patch("pathlib.Path.home", return_value=home):
        yield home


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "util.js").write_text("module.exports = {};\n")
    (root / "src" / "app.js").write_text(
        "import fs from 'fs';\n"
        "import util from './util';\n"
        "import again from './util.js';\n"
        "const viaRequire = require('./util');\n"
    )
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "node_modules" / "left-pad" / "index.js").write_text("import x from './y';\n")
    return root


def write_config(root: Path, options, **rule) -> Path:
    path = root / ".extlint.yaml"
    path.write_text(yaml.dump({"rules": {"import_extensions": dict(options=options, **rule)}}))
    return path


def test_check_reports_missing_extension(project):
    config_path = write_config(project, ["always"])
    runner = CliRunner()

    result = runner.invoke(main, ["--config", str(config_path), "check", str(project)])

    assert result.exit_code == 0, result.output
    assert 'src/app.js:2:18 - Missing file extension "js" for "./util"' in result.output
    assert "./util.js" not in result.output
    assert "left-pad" not in result.output
    assert "Total Issues: 1" in result.output


def test_check_commonjs_flag_adds_require_calls(project):
    config_path = write_config(project, ["always"])
    runner = CliRunner()

    result = runner.invoke(main, ["--config", str(config_path), "check", "--commonjs", str(project)])

    assert result.exit_code == 0, result.output
    assert "src/app.js:4:20" in result.output
    assert "Total Issues: 2" in result.output


def test_check_reports_unexpected_extension(project):
    config_path = write_config(project, ["never"])
    runner = CliRunner()

    result = runner.invoke(main, ["--config", str(config_path), "check", str(project)])

    assert 'Unexpected use of file extension "js" for "./util.js"' in result.output
    assert "Total Issues: 1" in result.output


def test_fail_on_error_exit_code(project):
    config_path = write_config(project, ["always"])
    runner = CliRunner()

    result = runner.invoke(main, ["--config", str(config_path), "check", "--fail-on-error", str(project)])
    assert result.exit_code == 1

    config_path = write_config(project, ["always"], severity="warning")
    result = runner.invoke(main, ["--config", str(config_path), "check", "--fail-on-error", str(project)])
    assert result.exit_code == 0


def test_json_reporter(project, tmp_path):
    config_path = write_config(project, ["always"])
    output = tmp_path / "report.json"
    runner = CliRunner()

    result = runner.invoke(main, [
        "--config", str(config_path), "check", str(project), "--reporter", "json", "--output", str(output),
    ])

    assert result.exit_code == 0, result.output
    report = json.loads(output.read_text())
    assert report["issues_summary"]["total_issues"] == 1
    issues = [issue for f in report["files"] for issue in f["issues"]]
    assert issues[0]["symbol"] == "./util"


def test_invalid_options_exit_with_usage_error(project):
    config_path = write_config(project, ["sometimes"])
    runner = CliRunner()

    result = runner.invoke(main, ["--config", str(config_path), "check", str(project)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output

import pytest
from pathlib import Path
import yaml
from unittest.mock import patch

from extlint.config.loader import load_config, deep_merge
from extlint.config.defaults import DEFAULT_CONFIG


@pytest.fixture
def mock_home_dir(tmp_path: Path):
    """Mocks the home directory to isolate global config tests."""
    home_dir = tmp_path / "home" / "user"
    home_dir.mkdir(parents=True)
    return home_dir


@pytest.fixture
def project_dir(tmp_path: Path):
    proj_dir = tmp_path / "my_project"
    proj_dir.mkdir()
    return proj_dir


def test_load_default_config(project_dir, mock_home_dir):
    with patch("pathlib.Path.home", return_value=mock_home_dir):
        config = load_config(str(project_dir))
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG


def test_merge_project_config(project_dir, mock_home_dir):
    """Project config overrides global config, which overrides defaults."""
    global_config_dir = mock_home_dir / ".extlint"
    global_config_dir.mkdir()
    (global_config_dir / "config.yaml").write_text(yaml.dump({
        "rules": {"import_extensions": {"options": ["never"], "severity": "warning"}},
        "ignore_paths": ["vendor/"],
    }))

    (project_dir / ".extlint.yaml").write_text(yaml.dump({
        "rules": {"import_extensions": {"options": ["always", {"ignorePackages": True}]}},
        "settings": {"core_modules": ["electron"]},
    }))

    with patch("pathlib.Path.home", return_value=mock_home_dir):
        config = load_config(str(project_dir))

    rule = config["rules"]["import_extensions"]
    assert rule["options"] == ["always", {"ignorePackages": True}]
    assert rule["severity"] == "warning"
    assert rule["enabled"] is True
    assert config["ignore_paths"] == ["vendor/"]
    assert config["settings"]["core_modules"] == ["electron"]
    assert config["settings"]["external_module_folders"] == ["node_modules"]


def test_invalid_project_yaml_raises_error(project_dir, mock_home_dir):
    (project_dir / ".extlint.yaml").write_text("rules: [1, 2,")

    with patch("pathlib.Path.home", return_value=mock_home_dir):
        with pytest.raises(ValueError, match="Error parsing project config file"):
            load_config(str(project_dir))


def test_invalid_global_yaml_is_ignored(project_dir, mock_home_dir):
    global_config_dir = mock_home_dir / ".extlint"
    global_config_dir.mkdir()
    (global_config_dir / "config.yaml").write_text("- just\n- a list\n")

    with patch("pathlib.Path.home", return_value=mock_home_dir):
        config = load_config(str(project_dir))
    assert config == DEFAULT_CONFIG


def test_explicit_config_file_must_exist(project_dir, mock_home_dir):
    with patch("pathlib.Path.home", return_value=mock_home_dir):
        with pytest.raises(ValueError, match="Config file not found"):
            load_config(str(project_dir), config_file=str(project_dir / "custom.yaml"))


def test_deep_merge_logic():
    base = {"a": 1, "b": {"c": 2, "d": [3, 4]}}
    override = {"b": {"c": 5, "e": 6}, "f": 7}

    merged = deep_merge(base, override)

    assert merged == {"a": 1, "b": {"c": 5, "d": [3, 4], "e": 6}, "f": 7}

import json
from pathlib import Path

import pytest

from extlint.config.extensions import normalize_options
from extlint.config.settings import ResolverSettings
from extlint.resolve import import_type
from extlint.resolve.node_resolver import NodeModuleResolver
from extlint.rules.extension_checker import ExtensionChecker


@pytest.fixture
def project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "lib").mkdir(parents=True)
    (src / "app.js").write_text("")
    (src / "util.js").write_text("")
    (src / "data.json").write_text("{}")
    (src / "lib" / "index.js").write_text("")
    (src / "lib.js").write_text("")

    lodash = tmp_path / "node_modules" / "lodash"
    lodash.mkdir(parents=True)
    (lodash / "package.json").write_text(json.dumps({"main": "lodash.js"}))
    (lodash / "lodash.js").write_text("")
    (lodash / "fp.js").write_text("")

    scoped = tmp_path / "node_modules" / "@scope" / "pkg"
    scoped.mkdir(parents=True)
    (scoped / "index.js").write_text("")

    broken = tmp_path / "node_modules" / "broken"
    broken.mkdir(parents=True)
    (broken / "package.json").write_text("{not json")
    (broken / "index.js").write_text("")
    return tmp_path


@pytest.fixture
def resolver(project: Path) -> NodeModuleResolver:
    return NodeModuleResolver(project / "src" / "app.js", ResolverSettings())


def test_relative_specifiers(resolver, project):
    src = (project / "src").resolve()
    assert resolver.resolve("./util") == str(src / "util.js")
    assert resolver.resolve("./util.js") == str(src / "util.js")
    assert resolver.resolve("./data") == str(src / "data.json")
    assert resolver.resolve("./missing") is None


def test_file_wins_over_directory_index(resolver, project):
    src = (project / "src").resolve()
    assert resolver.resolve("./lib") == str(src / "lib.js")
    assert resolver.resolve("./lib/") == str(src / "lib" / "index.js")


def test_package_resolution(resolver, project):
    modules = (project / "node_modules").resolve()
    assert resolver.resolve("lodash") == str(modules / "lodash" / "lodash.js")
    assert resolver.resolve("lodash/fp") == str(modules / "lodash" / "fp.js")
    assert resolver.resolve("@scope/pkg") == str(modules / "@scope" / "pkg" / "index.js")
    assert resolver.resolve("not-installed") is None


def test_unreadable_manifest_falls_back_to_index(resolver, project):
    modules = (project / "node_modules").resolve()
    assert resolver.resolve("broken") == str(modules / "broken" / "index.js")


def test_builtins(resolver):
    assert resolver.is_builtin("fs")
    assert resolver.is_builtin("fs/promises")
    assert resolver.is_builtin("node:test")
    assert not resolver.is_builtin("lodash")
    assert resolver.resolve("fs") is None


def test_core_modules_setting(project):
    settings = ResolverSettings(core_modules=["electron"])
    resolver = NodeModuleResolver(project / "src" / "app.js", settings)
    assert resolver.is_builtin("electron")
    assert resolver.is_builtin("electron/main")


def test_package_main_predicates(resolver):
    assert resolver.is_external_package_main("lodash")
    assert not resolver.is_external_package_main("lodash/fp")
    assert not resolver.is_external_package_main("./util")
    assert resolver.is_external_package_main("not-installed")
    assert resolver.is_scoped_package_main("@scope/pkg")
    assert not resolver.is_scoped_package_main("@scope/pkg/sub")


def test_external_module_main_requires_external_folder():
    settings = ResolverSettings()
    assert import_type.is_external_module_main("lodash", settings, "/p/node_modules/lodash/lodash.js")
    assert not import_type.is_external_module_main("lodash", settings, "/p/src/lodash.js")
    assert import_type.base_module("@scope/pkg/deep") == "@scope/pkg"
    assert import_type.base_module("pkg/deep") == "pkg"


def test_linked_workspace_package_is_a_package_main(tmp_path: Path):
    shared = tmp_path / "packages" / "shared"
    shared.mkdir(parents=True)
    (shared / "index.js").write_text("")
    app = tmp_path / "packages" / "app"
    app.mkdir()
    (app / "main.js").write_text("")
    modules = tmp_path / "node_modules"
    modules.mkdir()
    try:
        (modules / "shared").symlink_to(shared, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported here")

    resolver = NodeModuleResolver(app / "main.js", ResolverSettings())
    assert resolver.resolve("shared") == str((shared / "index.js").resolve())
    assert resolver.is_external_package_main("shared")

    checker = ExtensionChecker(normalize_options(["always", {"ignorePackages": True}]), resolver)
    assert checker.check("shared") is None

    checker = ExtensionChecker(normalize_options(["always"]), resolver)
    assert checker.check("shared").message == 'Missing file extension "js" for "shared"'

import json
from pathlib import Path
from typing import Iterator, Optional

from extlint.config.settings import ResolverSettings
from extlint.resolve import import_type
from extlint.resolve.interfaces import ModuleResolver
from extlint.utils.logging import get_logger

logger = get_logger(__name__)

RELATIVE_PREFIXES = ("./", "../", "/")


class NodeModuleResolver(ModuleResolver):
    """
    Resolves specifiers the way Node's CommonJS loader does, relative to one importing file.

    Relative and absolute specifiers are looked up from the importer's directory;
    bare specifiers are searched in the external module folders of every
    ancestor directory.
    """

    def __init__(self, importer: Path, settings: Optional[ResolverSettings] = None):
        self.importer = Path(importer).resolve()
        self.settings = settings or ResolverSettings.default()

    def resolve(self, specifier: str) -> Optional[str]:
        if not specifier or self.is_builtin(specifier):
            return None

        if self._is_path_like(specifier):
            target = self.importer.parent / specifier
            if specifier.endswith("/") or specifier in (".", ".."):
                found = self._load_as_directory(target)
            else:
                found = self._load_as_file(target) or self._load_as_directory(target)
        else:
            found = self._load_from_module_folders(specifier)

        if found is None:
            logger.debug("specifier_unresolved", specifier=specifier, importer=str(self.importer))
            return None
        return str(found.resolve())

    def is_builtin(self, specifier: str) -> bool:
        return import_type.is_builtin(specifier, self.settings)

    def is_external_package_main(self, specifier: str) -> bool:
        # Classified by name only; linked workspace packages resolve outside node_modules.
        return import_type.is_external_module_main(specifier, self.settings)

    def is_scoped_package_main(self, specifier: str) -> bool:
        return import_type.is_scoped_main(specifier)

    @staticmethod
    def _is_path_like(specifier: str) -> bool:
        return specifier in (".", "..") or specifier.startswith(RELATIVE_PREFIXES)

    def _load_as_file(self, target: Path) -> Optional[Path]:
        if target.is_file():
            return target
        for extension in self.settings.extensions:
            candidate = target.with_name(target.name + extension)
            if candidate.is_file():
                return candidate
        return None

    def _load_as_directory(self, target: Path) -> Optional[Path]:
        if not target.is_dir():
            return None

        main = self._read_package_main(target / "package.json")
        if main:
            main_target = target / main
            found = self._load_as_file(main_target) or self._load_index(main_target)
            if found is not None:
                return found
        return self._load_index(target)

    def _load_index(self, directory: Path) -> Optional[Path]:
        if not directory.is_dir():
            return None
        for extension in self.settings.extensions:
            candidate = directory / f"index{extension}"
            if candidate.is_file():
                return candidate
        return None

    def _read_package_main(self, manifest: Path) -> Optional[str]:
        if not manifest.is_file():
            return None
        try:
            with open(manifest, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("package_manifest_unreadable", path=str(manifest), error=str(e))
            return None
        main = data.get("main") if isinstance(data, dict) else None
        return main if isinstance(main, str) and main else None

    def _module_folders(self) -> Iterator[Path]:
        for directory in self.importer.parents:
            for folder in self.settings.external_module_folders:
                if directory.name == folder:
                    continue
                yield directory / folder

    def _load_from_module_folders(self, specifier: str) -> Optional[Path]:
        for folder in self._module_folders():
            if not folder.is_dir():
                continue
            target = folder / specifier
            found = self._load_as_file(target) or self._load_as_directory(target)
            if found is not None:
                return found
        return None

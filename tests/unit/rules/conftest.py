from typing import Dict, Iterable, Optional

import pytest

from extlint.resolve.interfaces import ModuleResolver


class FakeResolver(ModuleResolver):
    """Deterministic resolver: a fixed specifier -> path table, no file system."""

    def __init__(
        self,
        paths: Optional[Dict[str, str]] = None,
        builtins: Iterable[str] = (),
        package_mains: Iterable[str] = (),
        scoped_mains: Iterable[str] = (),
    ):
        self.paths = dict(paths or {})
        self.builtins = set(builtins)
        self.package_mains = set(package_mains)
        self.scoped_mains = set(scoped_mains)
        self.calls = []

    def resolve(self, specifier: str) -> Optional[str]:
        self.calls.append(specifier)
        return self.paths.get(specifier)

    def is_builtin(self, specifier: str) -> bool:
        return specifier in self.builtins

    def is_external_package_main(self, specifier: str) -> bool:
        return specifier in self.package_mains

    def is_scoped_package_main(self, specifier: str) -> bool:
        return specifier in self.scoped_mains


@pytest.fixture
def make_resolver():
    return FakeResolver

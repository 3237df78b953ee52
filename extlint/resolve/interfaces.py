from abc import ABC, abstractmethod
from typing import Optional


class ModuleResolver(ABC):
    """
    The capabilities the extension checker needs from its host.

    Implementations are bound to one importing file and one settings snapshot,
    and must be side-effect free for a given specifier.
    """

    @abstractmethod
    def resolve(self, specifier: str) -> Optional[str]:
        """Returns the absolute path the specifier resolves to, or None if unresolvable."""
        raise NotImplementedError

    @abstractmethod
    def is_builtin(self, specifier: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_external_package_main(self, specifier: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_scoped_package_main(self, specifier: str) -> bool:
        raise NotImplementedError

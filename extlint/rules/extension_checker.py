from __future__ import annotations
import posixpath
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from extlint.analyzers.ast_models import ImportRecord
from extlint.config.extensions import PolicyConfig
from extlint.resolve.interfaces import ModuleResolver
from extlint.rules.extension_policy import is_forbidden, is_required
from extlint.utils.logging import get_logger

logger = get_logger(__name__)


class Diagnostic(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["missing", "unexpected"]
    message: str
    specifier: str
    extension: str = ""
    node: Optional[Any] = Field(None, exclude=True)


def extension_of(path: str) -> str:
    """Returns the suffix of the last path segment without its dot, or "" if there is none."""
    return posixpath.splitext(path.replace("\\", "/"))[1][1:]


def missing_extension_message(extension: str, specifier: str) -> str:
    quoted = f'"{extension}" ' if extension else ""
    return f'Missing file extension {quoted}for "{specifier}"'


def unexpected_extension_message(extension: str, specifier: str) -> str:
    return f'Unexpected use of file extension "{extension}" for "{specifier}"'


class ExtensionChecker:
    """
    Decides, one specifier at a time, whether its extension usage violates the policy.

    The checker keeps no state between calls; the resolver carries the
    per-file context.
    """

    def __init__(self, config: PolicyConfig, resolver: ModuleResolver):
        self.config = config
        self.resolver = resolver

    def check(self, specifier: str, node: Any = None) -> Optional[Diagnostic]:
        """
        Checks one import specifier.

        Returns:
            A Diagnostic for a missing or unexpected extension, otherwise None.
        """
        if self.resolver.is_builtin(specifier):
            return None

        resolved = self.resolver.resolve(specifier)
        # Unresolved imports still get feedback based on the text as written.
        extension = extension_of(resolved or specifier)

        is_package_main = (
            self.resolver.is_external_package_main(specifier)
            or self.resolver.is_scoped_package_main(specifier)
        )

        logger.debug(
            "extension_checked",
            specifier=specifier,
            resolved=resolved,
            extension=extension,
            is_package_main=is_package_main,
        )

        if not extension or not specifier.endswith(f".{extension}"):
            if is_required(self.config, extension, is_package_main) and not is_forbidden(self.config, extension):
                return Diagnostic(
                    kind="missing",
                    message=missing_extension_message(extension, specifier),
                    specifier=specifier,
                    extension=extension,
                    node=node,
                )
            return None

        if is_forbidden(self.config, extension) and self._resolves_without_extension(specifier, extension, resolved):
            return Diagnostic(
                kind="unexpected",
                message=unexpected_extension_message(extension, specifier),
                specifier=specifier,
                extension=extension,
                node=node,
            )
        return None

    def check_declaration(self, source: Optional[ImportRecord]) -> Optional[Diagnostic]:
        """Checks an import or re-export declaration; ``export { foo }`` has no source."""
        if source is None:
            return None
        return self.check(source.specifier, source)

    def check_require(self, record: ImportRecord) -> Optional[Diagnostic]:
        """Checks a static require() call when CommonJS checking is enabled."""
        if not self.config.commonjs or record.kind != "require":
            return None
        return self.check(record.specifier, record)

    def check_record(self, record: ImportRecord) -> Optional[Diagnostic]:
        if record.kind == "require":
            return self.check_require(record)
        return self.check_declaration(record)

    def _resolves_without_extension(self, specifier: str, extension: str, resolved: Optional[str]) -> bool:
        stripped = specifier[: -(len(extension) + 1)]
        return self.resolver.resolve(stripped) == resolved

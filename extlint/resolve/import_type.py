import re
from pathlib import PurePath
from typing import Optional

from extlint.config.settings import ResolverSettings

NODE_PREFIX = "node:"

NODE_BUILTIN_MODULES = frozenset({
    "assert", "assert/strict", "async_hooks", "buffer", "child_process", "cluster",
    "console", "constants", "crypto", "dgram", "diagnostics_channel", "dns",
    "dns/promises", "domain", "events", "fs", "fs/promises", "http", "http2",
    "https", "inspector", "module", "net", "os", "path", "path/posix",
    "path/win32", "perf_hooks", "process", "punycode", "querystring", "readline",
    "readline/promises", "repl", "stream", "stream/consumers", "stream/promises",
    "stream/web", "string_decoder", "sys", "timers", "timers/promises", "tls",
    "trace_events", "tty", "url", "util", "util/types", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

_EXTERNAL_MODULE_MAIN_RE = re.compile(r"^\w((?!/).)*$")
_SCOPED_MAIN_RE = re.compile(r"^@[^/]+/?[^/]+$")


def base_module(name: str) -> str:
    """Returns the package part of a specifier: ``@scope/pkg`` or ``pkg``."""
    if name.startswith("@"):
        return "/".join(name.split("/")[:2])
    return name.split("/")[0]


def is_builtin(name: str, settings: ResolverSettings) -> bool:
    if name.startswith(NODE_PREFIX):
        return True
    if name in NODE_BUILTIN_MODULES:
        return True
    base = base_module(name)
    return base in NODE_BUILTIN_MODULES or base in settings.core_modules


def is_external_path(path: Optional[str], settings: ResolverSettings) -> bool:
    if not path:
        return True
    parts = PurePath(path).parts
    return any(folder in parts for folder in settings.external_module_folders)


def is_external_module_main(name: str, settings: ResolverSettings, path: Optional[str] = None) -> bool:
    """True for a bare package name such as ``lodash`` (no subpath)."""
    return bool(_EXTERNAL_MODULE_MAIN_RE.match(name)) and is_external_path(path, settings)


def is_scoped_main(name: str) -> bool:
    """True for a scoped package name such as ``@babel/core`` (no subpath)."""
    return bool(_SCOPED_MAIN_RE.match(name))

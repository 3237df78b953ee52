from pathlib import Path
from typing import Dict, Iterable, Optional

from extlint.analyzers.base import BaseParser
from extlint.analyzers.javascript_parser import JavaScriptParser, TsxParser, TypeScriptParser

PARSERS = {
    "javascript": JavaScriptParser,
    "typescript": TypeScriptParser,
    "tsx": TsxParser,
}

DEFAULT_LANGUAGE_MAP = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def create_parser(language: str) -> BaseParser:
    parser = PARSERS.get(language)
    if not parser:
        raise ValueError(f"Unsupported language: {language}. Supported languages are: {list(PARSERS.keys())}")
    return parser()


def language_map_from_config(languages: Dict[str, Dict[str, Iterable[str]]]) -> Dict[str, str]:
    """Inverts the ``languages`` config section into a suffix -> language map."""
    mapping: Dict[str, str] = {}
    for language, section in languages.items():
        if language not in PARSERS:
            continue
        for ext in section.get("extensions", []):
            ext = ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            mapping[ext] = language
    return mapping


def detect_language(file_path: str, language_map: Optional[Dict[str, str]] = None) -> str:
    """Detect the grammar to parse a file with from its extension."""
    ext = Path(file_path).suffix.lower()
    return (language_map or DEFAULT_LANGUAGE_MAP).get(ext, "unknown")

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from gitignore_parser import parse_gitignore


def read_yaml_file(path: Path) -> Dict[str, Any]:
    """Reads a YAML file and returns its content as a dictionary."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_yaml_file(data: Dict[str, Any], path: Path) -> None:
    """Writes a dictionary to a YAML file."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, indent=2, sort_keys=False)


def scan_directory(
    path: str,
    suffixes: Iterable[str],
    ignore_paths: Optional[List[str]] = None,
) -> List[Path]:
    """
    Scans a directory recursively for files with the given suffixes, filtering
    out .gitignore matches and ignored directory names.
    """
    base_dir = Path(path)
    gitignore_path = base_dir / ".gitignore"
    wanted = {s.lower() for s in suffixes}
    ignored_dirs = {p.strip("/") for p in (ignore_paths or []) if p.strip("/")}

    matches = None
    if gitignore_path.is_file():
        matches = parse_gitignore(str(gitignore_path), base_dir=str(base_dir))

    filtered_files = []
    for file_path in sorted(base_dir.rglob("*")):
        if not file_path.is_file() or file_path.suffix.lower() not in wanted:
            continue

        relative_parts = file_path.relative_to(base_dir).parts[:-1]
        if any(part in ignored_dirs for part in relative_parts):
            continue

        if matches and matches(str(file_path)):
            continue

        filtered_files.append(file_path)

    return filtered_files

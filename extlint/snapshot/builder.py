from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from extlint import __version__
from extlint.analyzers.parser_factory import create_parser, detect_language, language_map_from_config
from extlint.snapshot.models import FileSnapshot, ProjectSnapshot, ScanMetadata
from extlint.utils.file_utils import scan_directory
from extlint.utils.logging import get_logger

logger = get_logger(__name__)


class ImportSnapshotBuilder:
    """Walks a source tree and records the import sites of every supported file."""

    def __init__(self, root: Path, config: Dict[str, Any]):
        self.root = Path(root).resolve()
        self.config = config
        self.language_map = language_map_from_config(config.get("languages", {}))
        self._parsers = {}

    def _collect_files(self) -> List[Path]:
        if self.root.is_file():
            return [self.root]
        return scan_directory(
            str(self.root),
            suffixes=self.language_map.keys(),
            ignore_paths=self.config.get("ignore_paths", []),
        )

    def _parser_for(self, language: str):
        if language not in self._parsers:
            self._parsers[language] = create_parser(language)
        return self._parsers[language]

    def scan_root(self) -> Path:
        return self.root.parent if self.root.is_file() else self.root

    def build(self) -> ProjectSnapshot:
        base = self.scan_root()
        files: List[FileSnapshot] = []

        for path in self._collect_files():
            language = detect_language(str(path), self.language_map)
            if language == "unknown":
                logger.debug("file_skipped", path=str(path), reason="unsupported language")
                continue
            try:
                source = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("file_unreadable", path=str(path), error=str(e))
                continue

            parser = self._parser_for(language)
            parser.parse(source)
            files.append(FileSnapshot(
                path=path.relative_to(base).as_posix(),
                language=language,
                imports=parser.extract_imports(),
            ))

        logger.info("scan_built", root=str(base), files=len(files))
        metadata = ScanMetadata(
            timestamp=datetime.now(timezone.utc),
            project_name=base.name,
            root=str(base),
            file_count=len(files),
            tool_version=__version__,
        )
        return ProjectSnapshot(metadata=metadata, files=files)

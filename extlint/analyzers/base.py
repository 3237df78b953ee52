from abc import ABC, abstractmethod
from typing import List, Optional
from tree_sitter import Node, Tree
from extlint.analyzers.ast_models import ImportRecord


class BaseParser(ABC):
    language_name: str = "unknown"

    def __init__(self):
        self.tree: Optional[Tree] = None
        self._source: bytes = b""

    def parse(self, source_code: str):
        self._source = source_code.encode("utf8")
        self.tree = self._parse(self._source)

    @abstractmethod
    def _parse(self, source_code: bytes) -> Tree:
        raise NotImplementedError

    @abstractmethod
    def extract_imports(self) -> List[ImportRecord]:
        raise NotImplementedError

    def _walk(self, node):
        stack = [node]
        while stack:
            n = stack.pop()
            yield n
            stack.extend(reversed(n.children))

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte:node.end_byte].decode("utf8")

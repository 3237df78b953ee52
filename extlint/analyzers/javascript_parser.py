from typing import List, Optional

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from extlint.analyzers.ast_models import ImportKind, ImportRecord
from extlint.analyzers.base import BaseParser
from extlint.utils.logging import get_logger

logger = get_logger(__name__)

DECLARATION_KINDS = {
    "import_statement": "import",
    "export_statement": "export",
}

SINGLE_CHAR_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}


def decode_escape(sequence: str) -> str:
    """Returns the value of one JS string escape such as ``\\n``, ``\\x2e`` or ``\\u{2e}``."""
    body = sequence[1:]
    if not body or body[0] in "\r\n\u2028\u2029":
        # line continuation
        return ""
    if body[0] in "xu" and len(body) > 1:
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        try:
            return chr(int(digits, 16))
        except ValueError:
            return body
    return SINGLE_CHAR_ESCAPES.get(body, body)


class JavaScriptParser(BaseParser):
    """Finds import declarations, re-exports and static require() calls."""
    language_name = "javascript"

    def __init__(self):
        super().__init__()
        self.language = self._load_language()
        self.parser = Parser(self.language)

    def _load_language(self) -> Language:
        return Language(tsjs.language())

    def _parse(self, source_code: bytes):
        tree = self.parser.parse(source_code)
        if tree.root_node.has_error:
            logger.debug("parse_errors", language=self.language_name)
        return tree

    def extract_imports(self) -> List[ImportRecord]:
        records: List[ImportRecord] = []
        if not self.tree or not self.tree.root_node:
            return records

        for node in self._walk(self.tree.root_node):
            if node.type in DECLARATION_KINDS:
                source = node.child_by_field_name("source")
                # export { foo }; has nothing to check
                if source is None or source.type != "string":
                    continue
                records.append(self._record(source, DECLARATION_KINDS[node.type]))
            elif node.type == "call_expression" and self.is_static_require(node):
                argument = node.child_by_field_name("arguments").named_children[0]
                records.append(self._record(node, "require", value_node=argument))
        return records

    def is_static_require(self, node: Node) -> bool:
        """True for ``require("x")``: a plain identifier callee and one string literal argument."""
        if node.type != "call_expression":
            return False
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "identifier" or self._text(callee) != "require":
            return False
        arguments = node.child_by_field_name("arguments")
        if arguments is None:
            return False
        args = [child for child in arguments.named_children if child.type != "comment"]
        return len(args) == 1 and args[0].type == "string"

    def _string_value(self, node: Node) -> str:
        """Returns the literal's value, with escape sequences decoded."""
        if not node.named_children:
            return self._text(node)[1:-1]
        parts = []
        for child in node.named_children:
            if child.type == "escape_sequence":
                parts.append(decode_escape(self._text(child)))
            else:
                parts.append(self._text(child))
        return "".join(parts)

    def _record(self, node: Node, kind: ImportKind, value_node: Optional[Node] = None) -> ImportRecord:
        row, column = node.start_point
        return ImportRecord(
            specifier=self._string_value(value_node or node),
            kind=kind,
            line=row + 1,
            column=column + 1,
            node=node,
        )


class TypeScriptParser(JavaScriptParser):
    language_name = "typescript"

    def _load_language(self) -> Language:
        return Language(tsts.language_typescript())


class TsxParser(JavaScriptParser):
    language_name = "tsx"

    def _load_language(self) -> Language:
        return Language(tsts.language_tsx())

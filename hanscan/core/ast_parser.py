"""
Source Parser
Parses JavaScript/TypeScript sources with tree-sitter and reports ERROR and
MISSING nodes as diagnostics.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from hanscan.core.dialect import Dialect

logger = logging.getLogger(__name__)

_LANGUAGE_LOADERS = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

_MODULE_DECLARATIONS = ("import_statement", "export_statement")


@dataclass
class ParseDiagnostic:
    message: str
    line: int = 0
    column: int = 0


@dataclass
class ParseOutcome:
    source: bytes
    tree: Optional[Tree] = None
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.tree is not None and not self.diagnostics


class SourceParser:
    """
    tree-sitter backed parser.
    Languages are loaded once; tree-sitter Parser objects are not shared
    between threads, so each worker thread gets its own per grammar.
    """

    def __init__(self):
        self.languages: Dict[str, Language] = {
            name: Language(loader()) for name, loader in _LANGUAGE_LOADERS.items()
        }
        self._local = threading.local()

    def _parser_for(self, grammar: str) -> Parser:
        parsers = getattr(self._local, "parsers", None)
        if parsers is None:
            parsers = self._local.parsers = {}
        parser = parsers.get(grammar)
        if parser is None:
            parser = parsers[grammar] = Parser(self.languages[grammar])
        return parser

    def parse(self, source: str, dialect: Dialect) -> ParseOutcome:
        """
        Parse source text for the given dialect.
        A tree with any ERROR or MISSING node is returned as diagnostics only.
        Errors inside the text of a tagged template are tolerated: tags see
        raw text, so an invalid escape there only leaves the cooked value
        undefined. Script dialects reject import/export declarations.
        """
        source_bytes = source.encode("utf-8", "surrogatepass")
        tree = self._parser_for(dialect.grammar).parse(source_bytes)

        diagnostics = []
        if tree.root_node.has_error:
            diagnostics.extend(self._collect_diagnostics(tree, source_bytes))
        if not dialect.module:
            diagnostics.extend(_module_syntax(tree))

        if diagnostics:
            return ParseOutcome(source=source_bytes, diagnostics=diagnostics)
        return ParseOutcome(source=source_bytes, tree=tree)

    def _collect_diagnostics(self, tree: Tree, source: bytes) -> List[ParseDiagnostic]:
        diagnostics = []
        # (node, parent_is_error, in_tagged_text); children of ERROR nodes are not reported again
        stack = [(tree.root_node, False, False)]
        while stack:
            node, parent_is_error, in_tagged_text = stack.pop()
            is_error = node.type == "ERROR"

            if node.type == "template_string":
                in_tagged_text = _is_tagged(node)
            elif node.type == "template_substitution":
                in_tagged_text = False

            if is_error and in_tagged_text and not parent_is_error:
                logger.debug("Tolerating invalid escape in tagged template at line %d", node.start_point[0] + 1)
            elif (is_error or node.is_missing) and not parent_is_error:
                if node.is_missing:
                    msg = f"Missing expected token: '{node.type}'"
                else:
                    text = source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
                    if len(text) > 40:
                        text = text[:40] + "..."
                    msg = f"Unexpected syntax: '{text}'" if text else "Syntax error"
                diagnostics.append(ParseDiagnostic(
                    message=msg,
                    line=node.start_point[0] + 1,
                    column=node.start_point[1] + 1,
                ))

            if node.has_error:
                for child in reversed(node.children):
                    stack.append((child, is_error or parent_is_error, in_tagged_text))
        return diagnostics


def _is_tagged(template: Node) -> bool:
    parent = template.parent
    return parent is not None and parent.type == "call_expression" and parent.child_by_field_name("arguments") == template


def _module_syntax(tree: Tree) -> List[ParseDiagnostic]:
    """import/export declarations are only valid in module code."""
    return [
        ParseDiagnostic(
            message=f"'{node.type.split('_')[0]}' is not allowed in a script",
            line=node.start_point[0] + 1,
            column=node.start_point[1] + 1,
        )
        for node in tree.root_node.children
        if node.type in _MODULE_DECLARATIONS
    ]

"""
Literal Extractor
Walks a tree-sitter syntax tree and yields every text-bearing node:
  - string literals (escape-decoded value)
  - static segments of template literals (cooked value)
  - JSX text runs (raw source text between tags and expressions)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from tree_sitter import Node, Tree

from hanscan.utils.escapes import EscapeError, decode_escapes

logger = logging.getLogger(__name__)

# Children of a jsx_element that belong to a text run rather than bounding it.
_JSX_TEXT_TYPES = {"jsx_text", "html_character_reference", "comment"}


class CandidateKind(Enum):
    STRING_LITERAL = "string-literal"
    TEMPLATE_SEGMENT = "template-segment"
    MARKUP_TEXT = "markup-text"


@dataclass(frozen=True)
class Candidate:
    kind: CandidateKind
    value: str
    start: int
    end: int

    @property
    def value_offset(self) -> int:
        """Bytes between the span start and the first character of value."""
        return 1 if self.kind is CandidateKind.STRING_LITERAL else 0


def _text(source: bytes, start: int, end: int) -> str:
    return source[start:end].decode("utf-8", "surrogatepass")


def _gaps(boundaries: List[Node]) -> List[Tuple[int, int]]:
    """Byte ranges between consecutive boundary nodes."""
    return [(left.end_byte, right.start_byte) for left, right in zip(boundaries, boundaries[1:])]


class LiteralExtractor:
    def __init__(self, source: bytes):
        self.source = source

    def extract(self, tree: Tree) -> Iterator[Candidate]:
        """Yield candidates from every depth of the tree, in document order."""
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            node_type = node.type

            # The TypeScript `string` keyword is an anonymous node of the same type.
            if not node.is_named:
                continue
            if node_type == "string":
                yield from self._string_literal(node)
            elif node_type == "template_string":
                yield from self._template_segments(node)
            elif node_type == "jsx_element":
                yield from self._jsx_text_runs(node)

            # Substitutions, nested elements and expressions are walked too.
            stack.extend(reversed(node.children))

    def _string_literal(self, node: Node) -> Iterator[Candidate]:
        body = _text(self.source, node.start_byte + 1, node.end_byte - 1)
        parent = node.parent
        if parent is not None and parent.type == "jsx_attribute":
            # JSX attribute strings carry no backslash escapes.
            value = body
        else:
            try:
                value = decode_escapes(body)
            except EscapeError as e:
                logger.debug("Skipping string at byte %d: %s", node.start_byte, e)
                return
        yield Candidate(CandidateKind.STRING_LITERAL, value, node.start_byte, node.end_byte)

    def _template_segments(self, node: Node) -> Iterator[Candidate]:
        children = node.children
        if len(children) < 2:
            return
        # Opening backtick, each ${...}, closing backtick.
        boundaries = [children[0]]
        boundaries.extend(c for c in children[1:-1] if c.type == "template_substitution")
        boundaries.append(children[-1])

        for start, end in _gaps(boundaries):
            raw = _text(self.source, start, end)
            try:
                cooked = decode_escapes(raw, template=True)
            except EscapeError as e:
                logger.debug("Skipping template segment at byte %d: %s", start, e)
                continue
            yield Candidate(CandidateKind.TEMPLATE_SEGMENT, cooked, start, end)

    def _jsx_text_runs(self, node: Node) -> Iterator[Candidate]:
        boundaries = [c for c in node.children if c.type not in _JSX_TEXT_TYPES]
        for start, end in _gaps(boundaries):
            if start < end:
                yield Candidate(CandidateKind.MARKUP_TEXT, _text(self.source, start, end), start, end)

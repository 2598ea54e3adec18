"""Shared tree-sitter parsing utilities.

Provides parse_file and parse_source as the entry points for all
TypeScript analysis in the inject_define_options.ts package, plus helpers
to read text back out of nodes.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

logger = logging.getLogger(__name__)

TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_HEX_ESCAPE = re.compile(r"^\\(?:x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|u\{([0-9a-fA-F]+)\})$")


def parse_source(code: str) -> Tree:
    """Parse TypeScript source code into a tree-sitter Tree.

    Args:
        code: TypeScript (or plain JavaScript) source as a string

    Returns:
        tree-sitter Tree. Syntax errors do not raise: they show up as
        ERROR nodes and are logged as a warning.

    Example:
        >>> parse_source("const x = 1;").root_node.type
        'program'
    """
    parser = Parser(TS_LANGUAGE)
    tree = parser.parse(code.encode("utf-8"))
    if tree.root_node.has_error:
        logger.warning("TypeScript source contains syntax errors; continuing with partial tree")
    return tree


def parse_file(path: str | Path) -> Tree:
    """Parse a TypeScript file into a tree-sitter Tree.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    source = Path(path).read_text(encoding="utf-8")
    return parse_source(source)


def node_text(node: Node) -> str:
    """Return the source text covered by a node."""
    return node.text.decode("utf-8") if node.text is not None else ""


def iter_descendants(node: Node) -> Iterator[Node]:
    """Yield every descendant of `node` in document (pre-order) order."""
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def first_descendant(node: Node, node_type: str) -> Node | None:
    """Return the first descendant of the given type, or None."""
    return next((d for d in iter_descendants(node) if d.type == node_type), None)


def significant_children(node: Node) -> list[Node]:
    """Named children of a node, without comments."""
    return [child for child in node.named_children if child.type != "comment"]


def _decode_escape(escape: str) -> str:
    if escape.startswith("\\\n") or escape.startswith("\\\r"):
        return ""  # line continuation
    body = escape[1:]
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    match = _HEX_ESCAPE.match(escape)
    if match:
        return chr(int(next(g for g in match.groups() if g), 16))
    return body


def string_literal_value(node: Node) -> str:
    """Decode a `string` node into its literal value.

    Quotes are dropped and escape sequences are resolved, so
    `"a\\"b"` becomes `a"b`.

    Raises:
        ValueError: If node is not a string literal
    """
    if node.type != "string":
        raise ValueError(f"Expected a string literal, got {node.type!r}")
    parts = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(_decode_escape(node_text(child)))
    return "".join(parts)

"""Component patcher: inject or override defineOptions({ name }) in .vue files.

Patching is surgical text editing, not a structural rewrite. Only the
first <script> block is touched; everything outside it is kept verbatim,
and inside it only the defineOptions call is added or replaced. The
block's own content is trimmed and re-wrapped as
`<script{attrs}>\\n{content}\\n</script>`, which is what makes a second
run produce identical output.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from inject_define_options.models import MatchedRoute, PatchedSource, PatchOutcome, ScriptBlock
from inject_define_options.reporting import Reporter
from inject_define_options.ts.core import parse_source

logger = logging.getLogger(__name__)

VUE_EXTENSION = ".vue"
MARKER = "defineOptions"

_SCRIPT_BLOCK = re.compile(r"<script([^>]*)>([\s\S]*?)</script>")
_MARKER_TOKEN = re.compile(rf"\b{MARKER}\b")
# Loose match: stops at the first "}", so nested objects are not supported.
_DEFINE_OPTIONS_CALL = re.compile(rf"{MARKER}\s*\(\s*\{{[^}}]*\}}\s*\)[ \t]*;?")
_PATH_SEPARATOR = re.compile(r"[\\/]")


def build_define_line(name: str) -> str:
    """Build the statement injected into the script block.

    Example:
        >>> build_define_line("UserList")
        'defineOptions({ name: "UserList" });'
    """
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'{MARKER}({{ name: "{escaped}" }});'


def find_script_block(text: str) -> ScriptBlock | None:
    """Locate the first <script ...>...</script> block, or None."""
    match = _SCRIPT_BLOCK.search(text)
    if match is None:
        return None
    return ScriptBlock(
        attrs=match.group(1),
        content=match.group(2),
        start=match.start(),
        end=match.end(),
    )


def has_marker(script_content: str) -> bool:
    """True if the script already mentions defineOptions as a whole token."""
    return _MARKER_TOKEN.search(script_content) is not None


def insert_offset(script_content: str) -> int:
    """Character offset just past the last top-level import declaration.

    The newline that ends the import line is included, so text inserted
    at the offset starts on its own line. Returns 0 when there are no
    imports.
    """
    tree = parse_source(script_content)
    imports = [node for node in tree.root_node.children if node.type == "import_statement"]
    if not imports:
        return 0

    # tree-sitter offsets are byte offsets into the UTF-8 encoding
    end_byte = imports[-1].end_byte
    offset = len(script_content.encode("utf-8")[:end_byte].decode("utf-8"))
    if script_content.startswith("\r\n", offset):
        return offset + 2
    if script_content.startswith("\n", offset):
        return offset + 1
    return offset


def _inject(script_content: str, define_line: str) -> str:
    """Insert the statement after the last import, or prepend it.

    The statement reuses the line ending of the import it follows. A
    comment sharing the import's line ends up on the line after the
    statement.
    """
    offset = insert_offset(script_content)
    if offset == 0:
        return f"{define_line}\n{script_content}"
    head, tail = script_content[:offset], script_content[offset:]
    newline = "\r\n" if head.endswith("\r\n") else "\n"
    if not head.endswith("\n"):
        head += newline
    return f"{head}{define_line}{newline}{tail}"


def patch_source(text: str, name: str) -> PatchedSource:
    """Return component text with defineOptions({ name }) injected or replaced.

    - First <script> block has a defineOptions call: the first call is
      overwritten with the new name (old arguments are discarded).
    - First <script> block has no call: the statement goes after the last
      import, or at the top of the block.
    - No <script> block: a `<script setup>` block holding only the
      statement is prepended to the file.

    Example:
        >>> patch_source("<template/>", "Home").text
        '<script setup>\\ndefineOptions({ name: "Home" });\\n</script>\\n<template/>'
    """
    define_line = build_define_line(name)
    block = find_script_block(text)
    if block is None:
        return PatchedSource(
            text=f"<script setup>\n{define_line}\n</script>\n{text}",
            created_script=True,
        )

    if has_marker(block.content):
        content = _DEFINE_OPTIONS_CALL.sub(lambda _: define_line, block.content, count=1)
    else:
        content = _inject(block.content, define_line)

    new_block = f"<script{block.attrs}>\n{content.strip()}\n</script>"
    return PatchedSource(
        text=text[: block.start] + new_block + text[block.end :],
        created_script=False,
    )


def is_excluded(relative_path: str, exclude_dirs: Iterable[str]) -> bool:
    """True if any excluded directory name is a whole segment of the path.

    `error/404` is excluded by "error"; `errorLogs/404` is not.
    """
    segments = _PATH_SEPARATOR.split(relative_path)
    return any(excluded in segments for excluded in exclude_dirs)


def resolve_component_path(views_dir: Path, relative_path: str) -> Path:
    """Map a relative import path to its .vue file under the views directory."""
    if not relative_path.endswith(VUE_EXTENSION):
        relative_path += VUE_EXTENSION
    return views_dir / relative_path


def patch_component(
    route: MatchedRoute,
    views_dir: Path,
    exclude_dirs: Iterable[str],
    reporter: Reporter,
) -> PatchOutcome:
    """Patch the component file of one route.

    Missing files are never created. I/O errors (permissions, unreadable
    files) propagate to the caller.

    Args:
        route: Route whose component should carry the route name
        views_dir: Root directory of the views
        exclude_dirs: Directory names to leave untouched
        reporter: Receives one status message for this route

    Returns:
        PatchOutcome describing what happened
    """
    if is_excluded(route.relative_path, exclude_dirs):
        reporter.info(f"Skipping component in excluded directory: {route.relative_path}")
        return PatchOutcome.EXCLUDED

    path = resolve_component_path(views_dir, route.relative_path)
    if not path.is_file():
        reporter.warn(f"File not found: {path}")
        return PatchOutcome.MISSING

    # newline="" keeps line endings exactly as they are on disk
    with open(path, encoding="utf-8", newline="") as f:
        original = f.read()

    patched = patch_source(original, route.name)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(patched.text)

    logger.debug("Wrote %s (%d -> %d chars)", path, len(original), len(patched.text))
    if patched.created_script:
        reporter.info(f"Added <script setup> to: {path}")
        return PatchOutcome.CREATED
    reporter.info(f"Patched: {path}")
    return PatchOutcome.PATCHED


def patch_components(
    routes: Iterable[MatchedRoute],
    views_dir: Path,
    exclude_dirs: Iterable[str],
    reporter: Reporter,
) -> None:
    """Patch every route's component in order, then report a summary."""
    exclude = tuple(exclude_dirs)
    outcomes: Counter[PatchOutcome] = Counter()
    for route in routes:
        outcomes[patch_component(route, views_dir, exclude, reporter)] += 1

    reporter.info(
        f"Done: {outcomes[PatchOutcome.PATCHED]} patched, "
        f"{outcomes[PatchOutcome.CREATED]} created, "
        f"{outcomes[PatchOutcome.EXCLUDED]} excluded, "
        f"{outcomes[PatchOutcome.MISSING]} missing"
    )

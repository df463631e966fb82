"""
Source Maps

Maps JSON-pointer paths of a YAML/JSON text to 1-based line/column,
so diagnostics can point back into the file that produced a value.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import yaml


logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class Position:
    """A location in a source file.

    Attributes:
        filename: File the position refers to
        line: 1-based line, 0 if unknown
        column: 1-based column, 0 if unknown
    """
    filename: str
    line: int = 0
    column: int = 0


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def to_pointer(path: Iterable) -> str:
    """Render path elements (keys and indices) as a JSON pointer."""
    return "".join(f"/{json_pointer_escape(str(p))}" for p in path)


def build_source_map(content: str) -> SourceMap:
    """Build a mapping from JSON-pointer paths to 1-based line/column.

    This uses PyYAML's node tree (yaml.compose) so we can track locations
    without changing the decoded value. JSON texts go through the same
    walk; tabs are expanded first since YAML forbids them as whitespace
    and expansion never changes line numbers.

    A text whose node tree cannot be built yields an empty map.
    """
    source_map: SourceMap = {}

    try:
        root = yaml.compose(content.expandtabs(), Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        logger.debug(f"No source map available: {e}")
        return source_map

    if root is None:
        return source_map

    def _record(path: str, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML uses 0-based line/column
        source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    # Aliased nodes are expanded once; later references only record a position
    expanded = set()

    def _walk(node, path: str) -> None:
        _record(path, node)

        if id(node) in expanded:
            return
        expanded.add(id(node))

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, f"{path}/{json_pointer_escape(str(key))}")
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, f"{path}/{idx}")

    _walk(root, "")
    return source_map


def lookup_position(filename: str, source_map: Optional[SourceMap], path: Iterable) -> Optional[Position]:
    """Return the position recorded for a path, or None if it has none."""
    if not source_map:
        return None

    entry = source_map.get(to_pointer(path))
    if not entry:
        return None

    return Position(filename=filename, line=entry.get("line", 0), column=entry.get("column", 0))


def lookup_nearest_position(filename: str, source_map: Optional[SourceMap], path: Iterable) -> Optional[Position]:
    """Return the position of the longest prefix of path that has one."""
    path = list(path)
    while True:
        position = lookup_position(filename, source_map, path)
        if position is not None or not path:
            return position
        path.pop()

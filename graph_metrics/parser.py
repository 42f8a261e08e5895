"""
Edge-list parser.

Input format: one edge per line, fields separated by whitespace. The first two
fields are integer vertex ids; anything after them (weights, timestamps) is
ignored. Lines starting with ``%`` are comments, blank lines are dropped and
lines with fewer than two fields are skipped. Any other line whose first two
fields are not integers aborts the whole parse with ParseError.
"""

import logging
import os
import re
from typing import Union

from graph_metrics.errors import ParseError
from graph_metrics.graph_store import GraphStore

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "%"
# ASCII decimal only: no digit separators, no non-ASCII digits
INTEGER_FIELD = re.compile(r"[+-]?[0-9]+")


def parse_edge_list(text: str, name: str = "") -> GraphStore:
    """
    Build a frozen GraphStore from the full text of an edge-list file.

    Args:
        text: Edge-list content
        name: Label attached to the resulting graph

    Returns:
        Populated, frozen GraphStore

    Raises:
        ParseError: If a data line's first two fields are not integers
    """
    graph = GraphStore(name=name)
    skipped = 0

    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        if line.startswith(COMMENT_PREFIX):
            continue

        fields = line.split()
        if len(fields) < 2:
            skipped += 1
            continue

        if not (INTEGER_FIELD.fullmatch(fields[0]) and INTEGER_FIELD.fullmatch(fields[1])):
            raise ParseError(
                f"line {line_number}: expected two integer vertex ids, got {line.strip()!r}",
                line_number=line_number,
                line=line,
            )
        source = int(fields[0])
        target = int(fields[1])

        graph.add_vertex(source)
        graph.add_vertex(target)
        graph.add_edge(source, target)

    if skipped:
        logger.debug("Skipped %d line(s) with fewer than two fields", skipped)
    logger.debug("Parsed %r: %d vertices, %d edges",
                 name, graph.vertex_count, graph.edge_count)
    return graph.freeze()


def read_edge_list(path: Union[str, os.PathLike]) -> GraphStore:
    """
    Read and parse an edge-list file.

    The graph is named after the file's base name.

    Raises:
        ParseError: If the file is not valid UTF-8 text or contains a bad data line
        OSError: If the file cannot be opened
    """
    path = os.fspath(path)
    logger.info("Reading edge list from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as err:
        raise ParseError(f"cannot decode file as text: {err}", path=path) from err

    try:
        return parse_edge_list(text, name=os.path.basename(path))
    except ParseError as err:
        err.path = path
        raise

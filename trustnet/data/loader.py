"""Edge-list loading from comma-separated text files."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from trustnet.core.types import Edge

logger = logging.getLogger(__name__)

_INT_FIELD = re.compile(r"[+-]?[0-9]+")


class EdgeParseError(ValueError):
    """Raised when an edge line is not UTF-8 or has a non-integer field."""

    def __init__(self, path: Path, line_number: int, line: str):
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: cannot parse edge from {line!r}")


def parse_edge_line(line: str) -> Optional[Edge]:
    """Parse one `source,target,weight[,...]` line.

    Args:
        line: Raw text line

    Returns:
        Edge, or None if the line has fewer than three fields

    Raises:
        ValueError: If one of the first three fields is not an integer
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) < 3:
        return None
    fields = [part.strip() for part in parts[:3]]
    for field in fields:
        if not _INT_FIELD.fullmatch(field):
            raise ValueError(f"not an integer: {field!r}")
    source, target, weight = (int(field) for field in fields)
    return Edge(source, target, weight)


def load_edges(path: Union[str, Path], skip_invalid: bool = False) -> List[Edge]:
    """Load edges from a CSV edge list such as soc-sign-bitcoinalpha.

    Lines with fewer than three fields are dropped. Fields after the third
    (e.g. a timestamp) are ignored.

    Args:
        path: Path to the edge-list file
        skip_invalid: Skip lines with non-integer fields instead of aborting

    Returns:
        Edges in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        EdgeParseError: On the first malformed line, unless skip_invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Edge list not found: {path}")

    edges: List[Edge] = []
    skipped = 0

    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            try:
                edge = parse_edge_line(raw.decode("utf-8"))
            except ValueError:
                # Covers UnicodeDecodeError too
                text = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                if not skip_invalid:
                    raise EdgeParseError(path, line_number, text) from None
                logger.warning("Skipping malformed line %d in %s: %r", line_number, path, text)
                skipped += 1
                continue
            if edge is not None:
                edges.append(edge)

    logger.info("Loaded %d edges from %s (%d malformed lines skipped)", len(edges), path, skipped)
    return edges

"""Merging two anchor paths into one conversion path."""

import logging
from typing import List, Sequence

from ..core.types import PathNode, nodes_equal

logger = logging.getLogger(__name__)


def collapse_cycles(path: Sequence[PathNode]) -> List[PathNode]:
    """Drop loops from an alternating token/pool path.

    Scanning left to right, a node that reappears later at the same parity
    (token positions stay tokens, pool positions stay pools) makes the scan
    jump to its last reappearance, discarding everything in between.
    """
    result: List[PathNode] = []
    p = 0
    while p < len(path):
        q = p + 2
        while q < len(path) - p % 2:
            if nodes_equal(path[p], path[q]):
                p = q
            q += 2
        result.append(path[p])
        p += 1
    return result


def merge_paths(source_path: Sequence[PathNode], target_path: Sequence[PathNode]) -> List[PathNode]:
    """Combine a source-to-anchor and a target-to-anchor path.

    The common tail both paths share is kept once, the target side is
    reversed so the result runs from source to target, and loops are
    collapsed. Returns ``[]`` if either side is empty.

    Two identical paths merge to their first node, the trivial route from a
    token to itself. For a token other than the anchor this is that token,
    not the shared anchor node.

    Args:
        source_path: Path from the source token to the anchor
        target_path: Path from the target token to the anchor

    Returns:
        Path from the source token to the target token
    """
    if not source_path or not target_path:
        return []

    i = len(source_path) - 1
    j = len(target_path) - 1
    while i >= 0 and j >= 0 and nodes_equal(source_path[i], target_path[j]):
        i -= 1
        j -= 1

    # source_path[i + 1] is the last node both sides agree on.
    joined = list(source_path[:i + 2]) + list(reversed(target_path[:j + 1]))
    merged = collapse_cycles(joined)

    if len(merged) % 2 == 0:
        logger.warning(f"Merged path has even length {len(merged)}; node kinds do not alternate")
    return merged

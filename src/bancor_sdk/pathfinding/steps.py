"""Splitting a conversion path into per-converter steps."""

from typing import List, Sequence, Union

from ..core.exceptions import ValidationError
from ..core.types import ConversionPath, ConversionPathStep, PathNode


def path_to_steps(path: Union[ConversionPath, Sequence[PathNode]]) -> List[ConversionPathStep]:
    """Turn ``[t0, c1, t1, c2, t2, ...]`` into ``[(c1, t0, t1), (c2, t1, t2), ...]``.

    Raises:
        ValidationError: the path does not alternate token, converter, token
    """
    nodes = path.path if isinstance(path, ConversionPath) else list(path)
    if not nodes:
        return []
    if len(nodes) % 2 == 0:
        raise ValidationError(
            f"A conversion path needs an odd number of nodes, got {len(nodes)}",
            field='path',
            value=[node.to_wire() for node in nodes]
        )

    return [
        ConversionPathStep(converter=nodes[i + 1], from_token=nodes[i], to_token=nodes[i + 2])
        for i in range(0, len(nodes) - 2, 2)
    ]

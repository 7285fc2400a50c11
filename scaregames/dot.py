"""Graphviz DOT output for tournament brackets."""

from __future__ import annotations

import itertools
import os
from typing import Iterator, Optional, Union

from scaregames.tournament import TournamentNode


def _node_lines(node: TournamentNode, ids: Iterator[int]) -> tuple[int, list[str]]:
    current = next(ids)
    winner = node.winner
    lines = [f'    node{current} [label="{winner.name}, (Power: {winner.scream_power})"]']
    for child in (node.left, node.right):
        if child is None:
            continue
        child_id, child_lines = _node_lines(child, ids)
        lines.extend(child_lines)
        lines.append(f"    node{current} -> node{child_id};")
    return current, lines


def tree_to_dot(root: Optional[TournamentNode]) -> str:
    """Render a bracket as a DOT digraph, numbering nodes in pre-order."""
    lines = ["digraph TournamentTree {"]
    if root is not None:
        _, body = _node_lines(root, itertools.count())
        lines.extend(body)
    lines.append("}")
    return "\n".join(lines) + "\n"


def save_tree_as_dot(
    filename: Union[str, os.PathLike], root: Optional[TournamentNode]
) -> None:
    """Write a bracket to a DOT file."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(tree_to_dot(root))
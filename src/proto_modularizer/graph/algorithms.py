"""Graph algorithms shared by the file graph and the module graph."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator


def find_cycles(
    nodes: Iterable[str],
    successors: Callable[[str], Iterable[str]],
) -> list[list[str]]:
    """Depth-first cycle search with a recursion-stack set (iterative).

    Traversal restarts from every unvisited node in ``nodes`` order. Every
    back-edge (an edge to a node currently on the DFS path) yields one cycle:
    the path slice from that node's position to the current node.

    Uses an explicit call stack to avoid Python recursion limits on deep
    dependency chains.

    Args:
        nodes: All node identifiers, in traversal order
        successors: Maps a node to the nodes it points at. Successors that
            are not in ``nodes`` are skipped.

    Returns:
        List of cycles; empty when the graph is acyclic
    """
    ordered = list(nodes)
    known = set(ordered)

    cycles: list[list[str]] = []
    visited: set[str] = set()
    on_path: set[str] = set()
    path_stack: list[str] = []

    def _enter(node: str) -> tuple[str, Iterator[str]]:
        visited.add(node)
        on_path.add(node)
        path_stack.append(node)
        return node, iter([s for s in successors(node) if s in known])

    for root in ordered:
        if root in visited:
            continue

        call_stack: list[tuple[str, Iterator[str]]] = [_enter(root)]

        while call_stack:
            current, it = call_stack[-1]
            pushed = False
            for nxt in it:
                if nxt not in visited:
                    call_stack.append(_enter(nxt))
                    pushed = True
                    break
                if nxt in on_path:
                    start = path_stack.index(nxt)
                    cycles.append(path_stack[start:])

            if not pushed:
                # All successors processed: "return" from current
                call_stack.pop()
                path_stack.pop()
                on_path.discard(current)

    return cycles

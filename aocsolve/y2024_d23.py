"""Finding groups of fully connected computers in a network."""

from collections import defaultdict


def _grow(graph, node, members, depth, visited, found) -> None:
    if (node, depth) in visited:
        return
    visited.add((node, depth))
    for jump in graph[node]:
        if all(jump in graph[member] for member in members):
            bigger = members | {jump}
            found.append(bigger)
            _grow(graph, jump, bigger, depth + 1, visited, found)


def solve(text: str) -> tuple[int, str]:
    """Return the triangles holding a 't' computer and the largest group's name list."""
    graph: dict[str, list[str]] = defaultdict(list)
    for line in text.splitlines():
        if not line:
            continue
        left, separator, right = line.partition("-")
        if not separator:
            raise ValueError(f"malformed link {line!r}")
        graph[left].append(right)
        graph[right].append(left)

    groups: set[tuple[str, ...]] = set()
    for node in sorted(graph):
        found: list[frozenset[str]] = []
        _grow(graph, node, frozenset([node]), 0, set(), found)
        groups.update(tuple(sorted(g)) for g in found)

    triangles = sum(
        1 for g in groups if len(g) == 3 and any(m.startswith("t") for m in g)
    )
    largest = min(groups, key=lambda g: (-len(g), g), default=())
    return triangles, ",".join(largest)
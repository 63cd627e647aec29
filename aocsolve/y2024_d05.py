"""Checking and repairing page orderings of print updates."""


def solve(text: str) -> tuple[int, int]:
    """Return middle-page sums of the correctly and of the repaired ordered updates."""
    rules_text, separator, updates_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between rules and updates")

    after: dict[int, set[int]] = {}
    for line in rules_text.splitlines():
        before, later = (int(n) for n in line.split("|"))
        after.setdefault(before, set()).add(later)

    updates = [
        [int(n) for n in line.split(",")] for line in updates_text.splitlines() if line
    ]

    ordered = 0
    repaired = 0
    for pages in updates:
        if all(b in after.get(a, ()) for a, b in zip(pages, pages[1:])):
            ordered += pages[len(pages) // 2]
            continue
        ranks = sorted(
            (
                sum(
                    1
                    for j, other in enumerate(pages)
                    if j != i and page in after.get(other, ())
                ),
                i,
            )
            for i, page in enumerate(pages)
        )
        repaired += pages[ranks[len(ranks) // 2][1]]
    return ordered, repaired
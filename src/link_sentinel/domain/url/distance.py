"""String edit distance."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs.

    Case-sensitive and per character. Keeps two rows of the DP table.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]

from __future__ import annotations


def percentage(done: int, total: int) -> int:
    """Whole-number share of ``done`` out of ``total``, halves rounded up.

    Integer arithmetic keeps 12.5 -> 13 exact, unlike ``round()``.
    """
    if total <= 0:
        return 0
    return (200 * done + total) // (2 * total)

"""Spearman rank correlation between two diners' rankings.

Both sequences hold rank positions for the same items in the same order
(e.g. dishes sorted by ``dish_id``)::

    rho = 1 - (6 * sum((a[i] - b[i]) ** 2)) / (n * (n ** 2 - 1))

The result lies in ``[-1, 1]``: 1 for identical rankings, -1 for perfectly
reversed rankings.
"""

from typing import Optional, Sequence


def spearman_correlation(
    ranks_a: Optional[Sequence[int]],
    ranks_b: Optional[Sequence[int]],
) -> float:
    """Return the Spearman correlation of two aligned rank sequences.

    Degenerate inputs never raise:

    * either sequence ``None`` or lengths differ -> ``0.0``
    * empty sequences -> ``0.0``
    * a single item -> ``1.0`` (the formula divides by zero at ``n == 1``)
    """
    if ranks_a is None or ranks_b is None or len(ranks_a) != len(ranks_b):
        return 0.0

    n = len(ranks_a)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0

    sum_squared_diffs = sum((a - b) ** 2 for a, b in zip(ranks_a, ranks_b))
    return 1.0 - (6 * sum_squared_diffs) / (n * (n * n - 1))

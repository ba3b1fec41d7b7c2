"""Ring stitching.

Clipping produces many short fragments. ``optimize_rings`` joins fragments
whose endpoints meet into longer continuous rings by repeated pairwise scans
until a full pass makes no further merge.
"""

import logging
from collections.abc import Sequence

from shapeclip.domain import Point

logger = logging.getLogger(__name__)


def optimize_rings(rings: Sequence[Sequence[Point]], epsilon: float = 1e-6) -> list[list[Point]]:
    """Stitch rings that share endpoints.

    For each pair (i, j): if the last point of ring i equals the first point
    of ring j, ring j (minus its first point) is appended to ring i and ring
    j is consumed. Otherwise, if the last point of ring j equals the first
    point of ring i, ring i is appended to ring j and ring i is consumed.
    Passes repeat until nothing changes. Cost is O(rings^2) per pass.

    Args:
        rings: Input rings (left unmodified)
        epsilon: Tolerance for endpoint equality

    Returns:
        New list of non-empty, unconsumed rings in their original order
    """
    work = [list(ring) for ring in rings]
    used = [False] * len(work)
    merges = 0
    passes = 0

    changed = True
    while changed:
        changed = False
        passes += 1
        for i in range(len(work)):
            if used[i] or not work[i]:
                continue
            for j in range(len(work)):
                if i == j or used[j] or not work[j]:
                    continue

                if work[i][-1].equals(work[j][0], epsilon):
                    work[i].extend(work[j][1:])
                    used[j] = True
                    changed = True
                    merges += 1
                    break

                if work[j][-1].equals(work[i][0], epsilon):
                    work[j].extend(work[i][1:])
                    used[i] = True
                    changed = True
                    merges += 1
                    break

    result = [ring for ring, consumed in zip(work, used) if not consumed and ring]
    logger.debug(
        "Stitched %d rings into %d (%d merges, %d passes)",
        len(work),
        len(result),
        merges,
        passes,
    )
    return result

"""Group windows and doors by the zone they are tagged with.

Openings are not linked to spaces by a graph edge.  Instead each opening
carries a zone key property whose value is the name of its space, so the
join goes through a lookup table built once per run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from spacereport.extraction.resolver import get_related_zone_number

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_opening_index(
    openings: Iterable[T],
    zone_key: Callable[[T], str | None] = get_related_zone_number,
) -> dict[str, list[T]]:
    """Map each zone key to the openings tagged with it, in encounter order.

    Openings whose zone key resolves to ``None`` are left out.
    """
    index: dict[str, list[T]] = {}
    untagged = 0
    for opening in openings:
        key = zone_key(opening)
        if key is None:
            untagged += 1
            continue
        index.setdefault(key, []).append(opening)

    logger.debug(
        "Indexed openings into %d zones (%d without a zone key)",
        len(index),
        untagged,
    )
    return index

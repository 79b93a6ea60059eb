"""
Chirp listing helpers shared across routers/services.
"""

from __future__ import annotations

from typing import Iterable, Optional

from chirpy.domain.models import Chirp


def filter_and_sort(chirps: Iterable[Chirp], author_id: Optional[int] = None, order: Optional[str] = None) -> list[Chirp]:
    """
    Keep chirps by author_id (when given) and order them by id.

    Only order == "asc" sorts ascending; anything else, including None,
    sorts descending.
    """
    selected = [chirp for chirp in chirps if author_id is None or chirp.author_id == author_id]
    return sorted(selected, key=lambda chirp: chirp.id, reverse=order != "asc")

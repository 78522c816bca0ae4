"""Shortlist selection over ranked candidates."""

from __future__ import annotations

from typing import Sequence

from .models import ScoredCandidate


class ShortlistSelector:
    """Truncate an already-ranked list to its top entries."""

    def shortlist(
        self,
        scored: Sequence[ScoredCandidate],
        top_n: int,
        min_score: float,
    ) -> list[ScoredCandidate]:
        """Return the first ``top_n`` entries scoring at least ``min_score``.

        When nothing meets the threshold the first ``top_n`` entries of the
        unfiltered ranking are returned instead of an empty list.
        """
        if top_n <= 0:
            return []
        qualified = [entry for entry in scored if entry.score >= min_score]
        if qualified:
            return qualified[:top_n]
        return list(scored[:top_n])

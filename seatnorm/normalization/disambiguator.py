"""Pick one manifest record among candidates that share a lookup key.

Colliding records have section names that reduce to the same digit run, so the
digits cannot tell them apart. What is left is the letters: each candidate is
scored by how many of the vendor's letters it accounts for, counting a letter
only when it occurs exactly as often in both strings (case-insensitive).

    vendor "Lower Box 12"   letters: l o w e r b o x   -> {o: 2, w: 1, ...}
    manifest "Box 12"       letters: b o x             -> {b: 1, o: 1, x: 1}

Here ``b`` and ``x`` match (1 == 1) but ``o`` does not (2 != 1), so the score
is 2.
"""

import logging
from collections import Counter
from collections.abc import Sequence

from seatnorm.models.manifest import ManifestRecord
from seatnorm.normalization.validator import strip_to_letters

logger = logging.getLogger(__name__)

# More unaccounted-for vendor letters than this and the best guess is rejected.
MAX_UNMATCHED_LETTERS = 100


def letter_counts(letters: str) -> Counter[str]:
    """Count letters case-insensitively."""
    return Counter(letters.lower())


class Disambiguator:
    """Scores colliding manifest candidates against the raw vendor section."""

    def __init__(self, max_unmatched: int = MAX_UNMATCHED_LETTERS):
        self.max_unmatched = max_unmatched

    def choose(
        self, candidates: Sequence[ManifestRecord], raw_section: str | None
    ) -> ManifestRecord | None:
        """Return the best candidate, or None when nothing is trustworthy."""
        if len(candidates) == 1:
            return candidates[0]

        supplied = strip_to_letters(raw_section or "")
        supplied_counts = letter_counts(supplied)

        best: ManifestRecord | None = None
        best_score = 0

        for candidate in candidates:
            score = 0
            for letter, count in letter_counts(candidate.unique_chars).items():
                if supplied_counts.get(letter) == count:
                    score += count
                # Compared after every letter; a later candidate must strictly
                # beat the best so far, so ties keep the earlier one.
                if score > best_score:
                    best_score = score
                    best = candidate

        leftover = len(supplied) - best_score
        if leftover > self.max_unmatched:
            logger.debug(
                "Rejecting %r: %d of %d letters unmatched (limit %d)",
                raw_section, leftover, len(supplied), self.max_unmatched,
            )
            return None

        if best is None:
            logger.debug("No candidate shares any letters with %r", raw_section)
        else:
            logger.debug(
                "Chose section %s (%r) for %r with score %d",
                best.section_id, best.section_name, raw_section, best_score,
            )
        return best

"""Link prayer topic names to missionary directory entries"""

import re
from collections.abc import Iterable, Mapping

from thefuzz import fuzz

from app.config import get_settings

HONORIFIC_SUFFIX = re.compile(r"\s*선교사\s*$")
NAME_SEPARATOR = re.compile(r"\s*,\s*|\s+")

# Scores closer than this are treated as ambiguous
AMBIGUITY_MARGIN = 5


class MissionaryMatcher:
    """Matches prayer topic names against the missionary directory.

    Prayer topics often list a couple ("양은순 이선희", "최인규, 박정희") while
    the directory folder may join them ("양은순이선희") or add an alias in
    parentheses ("이상필(이산지)"). Any one of the listed names is enough.
    """

    def __init__(self, threshold: int | None = None):
        """
        Initialize matcher.

        Args:
            threshold: Fuzzy match threshold 0-100 (default: from config)
        """
        self.threshold = threshold if threshold is not None else get_settings().fuzzy_match_threshold

    def normalize_name(self, name: str) -> str:
        """Trim and drop a trailing 선교사 honorific."""
        return HONORIFIC_SUFFIX.sub("", (name or "").strip()).strip()

    def name_part_matches(self, missionary_name: str, part: str) -> bool:
        """Check one normalized name part against a normalized directory name."""
        if not part:
            return False
        if missionary_name == part:
            return True
        # Folder named "이상필(이산지)"
        if missionary_name.startswith(part + "("):
            return True
        # Folder named "양은순이선희": match either half
        if len(part) >= 2 and (missionary_name.startswith(part) or missionary_name.endswith(part)):
            return True
        return False

    def match(self, missionaries: Iterable, prayer_name: str) -> str | None:
        """
        Find the folder id of the missionary a prayer topic refers to.

        Args:
            missionaries: Directory entries with 'name' and 'folderId' keys; anything
                that is not a mapping is ignored
            prayer_name: Name field of a prayer topic record

        Returns:
            Folder id of the first matching entry, or None
        """
        normalized = self.normalize_name(prayer_name)
        if not normalized:
            return None

        candidates = [
            (self.normalize_name(str(m.get("name") or "")), m)
            for m in missionaries
            if isinstance(m, Mapping) and m.get("folderId")
        ]
        if not candidates:
            return None

        parts = [p for p in NAME_SEPARATOR.split(normalized) if p]
        for part in [*parts, normalized]:
            for missionary_name, missionary in candidates:
                if self.name_part_matches(missionary_name, part):
                    return str(missionary["folderId"])

        return self._fuzzy_match(normalized, candidates)

    def _fuzzy_match(self, normalized: str, candidates: list[tuple[str, Mapping]]) -> str | None:
        compact = re.sub(r"\s+", "", normalized)

        best_match = None
        best_score = 0
        second_best_score = 0
        for missionary_name, missionary in candidates:
            score = fuzz.ratio(compact, re.sub(r"\s+", "", missionary_name))
            if score > best_score:
                second_best_score = best_score
                best_score = score
                best_match = missionary
            elif score > second_best_score:
                second_best_score = score

        if best_match is None or best_score < self.threshold:
            return None
        if second_best_score and (best_score - second_best_score) < AMBIGUITY_MARGIN:
            return None
        return str(best_match["folderId"])


def match_missionary_by_name(missionaries: Iterable, prayer_name: str) -> str | None:
    """Module-level shortcut using the configured threshold."""
    return MissionaryMatcher().match(missionaries, prayer_name)

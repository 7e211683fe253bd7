"""Prayer topic name to missionary matching tests"""

from services.missionary_matcher import MissionaryMatcher, match_missionary_by_name

MISSIONARIES = [
    {"folderId": "f-lee-sp", "name": "이상필(이산지)"},
    {"folderId": "f-yang", "name": "양은순이선희"},
    {"folderId": "f-choi", "name": "최인규 선교사"},
    {"folderId": "f-kim", "name": "김민수"},
]


class TestMissionaryMatcher:
    """Test name matching logic."""

    def test_normalize_name_drops_honorific(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.normalize_name("  최인규 선교사 ") == "최인규"
        assert matcher.normalize_name("김민수선교사") == "김민수"
        assert matcher.normalize_name("") == ""

    def test_exact_match(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "김민수") == "f-kim"

    def test_honorific_on_directory_side(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "최인규") == "f-choi"

    def test_alias_in_parentheses(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "이상필") == "f-lee-sp"

    def test_joined_couple_matches_either_name(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "양은순 이선희") == "f-yang"
        assert matcher.match(MISSIONARIES, "이선희") == "f-yang"

    def test_comma_separated_names(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "최인규, 박정희") == "f-choi"

    def test_single_character_part_needs_exact_match(self):
        matcher = MissionaryMatcher(threshold=100)

        assert matcher.match(MISSIONARIES, "김") is None

    def test_blank_name(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "   ") is None
        assert matcher.match(MISSIONARIES, "선교사") is None

    def test_entries_without_folder_id_are_skipped(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match([{"name": "김민수"}], "김민수") is None

    def test_non_mapping_entries_are_skipped(self):
        matcher = MissionaryMatcher(threshold=85)
        missionaries = ["김민수", None, 42, ["f-x", "김민수"], {"folderId": "f-kim", "name": "김민수"}]

        assert matcher.match(missionaries, "김민수") == "f-kim"
        assert matcher.match("김민수", "김민수") is None

    def test_numeric_folder_id_is_returned_as_string(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match([{"folderId": 7, "name": "김민수"}], "김민수") == "7"

    def test_zero_threshold_is_kept(self):
        matcher = MissionaryMatcher(threshold=0)

        assert matcher.threshold == 0
        assert matcher.match([{"folderId": "f-park", "name": "박지훈"}], "박민호") == "f-park"
        assert MissionaryMatcher(threshold=85).match([{"folderId": "f-park", "name": "박지훈"}], "박민호") is None

    def test_fuzzy_fallback(self):
        matcher = MissionaryMatcher(threshold=60)

        assert matcher.match([{"folderId": "f-park", "name": "박지훈"}], "박지운") == "f-park"

    def test_fuzzy_ambiguous(self):
        matcher = MissionaryMatcher(threshold=60)
        missionaries = [
            {"folderId": "f-1", "name": "박지훈"},
            {"folderId": "f-2", "name": "박지운"},
        ]

        assert matcher.match(missionaries, "박지순") is None

    def test_no_match(self):
        matcher = MissionaryMatcher(threshold=85)

        assert matcher.match(MISSIONARIES, "홍길동") is None

    def test_module_shortcut_uses_settings(self):
        assert match_missionary_by_name(MISSIONARIES, "양은순") == "f-yang"

"""Tests for the zone-key opening index."""

from __future__ import annotations

import itertools

from spacereport.extraction.openings import build_opening_index


class TestOpeningIndex:
    def test_groups_by_zone_in_encounter_order(self, sample_model):
        index = build_opening_index(sample_model.by_type("IfcWindow"))

        assert set(index) == {"101", "102", "999"}
        assert [w.Name for w in index["101"]] == ["W-01", "W-02"]
        assert [w.Name for w in index["102"]] == ["W-03"]

    def test_untagged_openings_are_excluded(self, sample_model):
        index = build_opening_index(sample_model.by_type("IfcDoor"))

        assert list(index) == ["102"]
        assert [d.Name for d in index["102"]] == ["D-01"]

    def test_empty_input(self):
        assert build_opening_index([]) == {}

    def test_custom_key_function(self):
        openings = [("a", "1"), ("b", None), ("c", "1"), ("d", "2")]
        index = build_opening_index(openings, zone_key=lambda o: o[1])

        assert index == {"1": [("a", "1"), ("c", "1")], "2": [("d", "2")]}

    def test_stable_under_permutation(self):
        openings = [("a", "1"), ("b", "2"), ("c", "1"), ("d", None), ("e", "3"), ("f", "2")]
        expected = build_opening_index(openings, zone_key=lambda o: o[1])

        for permutation in itertools.permutations(openings):
            index = build_opening_index(permutation, zone_key=lambda o: o[1])
            assert set(index) == set(expected)
            for key, members in index.items():
                assert sorted(members) == sorted(expected[key])
                # Within a key, order follows the input order
                assert members == [o for o in permutation if o[1] == key]

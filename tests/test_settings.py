"""Tests for the preference overrides in fayin/settings.py."""

import pytest
from kivy.storage.jsonstore import JsonStore
from fayin import settings
from fayin.settings import read_study_prefs


@pytest.fixture
def store(tmp_path):
    return JsonStore(str(tmp_path / "prefs.json"))


class TestReadStudyPrefs:
    """Tests for read_study_prefs."""

    def test_no_store(self):
        assert read_study_prefs(None) == {
            "swipe_threshold": settings.SWIPE_THRESHOLD,
            "asset": settings.DECK_ASSET,
        }

    def test_empty_store(self, store):
        assert read_study_prefs(store)["swipe_threshold"] == 200

    def test_overrides(self, store):
        store.put("study", swipe_threshold=120, asset="Vowels")
        prefs = read_study_prefs(store)
        assert prefs == {"swipe_threshold": 120, "asset": "Vowels"}

    @pytest.mark.parametrize("value", [0, -5, "150", True, None])
    def test_invalid_threshold_falls_back(self, store, value):
        store.put("study", swipe_threshold=value)
        assert read_study_prefs(store)["swipe_threshold"] == settings.SWIPE_THRESHOLD

    def test_blank_asset_falls_back(self, store):
        store.put("study", asset="  ")
        assert read_study_prefs(store)["asset"] == settings.DECK_ASSET

    def test_broken_store(self):
        class Broken:
            def exists(self, key):
                raise OSError("disk gone")

        assert read_study_prefs(Broken())["asset"] == settings.DECK_ASSET

"""
Unit tests for creator ranking and category normalization.
"""

from types import SimpleNamespace

import pytest

from core.categories import normalize_categories, MAX_CATEGORIES
from services.matching import reach_score, rank_creators, matches_category


def make_creator(name, ig=None, tt=None, yt=None, engagement=None, categories=None):
    return SimpleNamespace(
        username=name,
        instagram_followers=ig,
        tiktok_followers=tt,
        youtube_followers=yt,
        avg_engagement_rate=engagement,
        categories=categories or [],
    )


@pytest.mark.unit
class TestReachScore:

    def test_sums_platforms_and_weights_by_engagement(self):
        creator = make_creator("a", ig=10000, tt=5000, yt=5000, engagement=5.0)
        assert reach_score(creator) == pytest.approx(21000.0)

    def test_missing_values_count_as_zero(self):
        assert reach_score(make_creator("a")) == 0
        assert reach_score(make_creator("b", tt=1000)) == pytest.approx(1000.0)

    def test_engagement_without_followers_scores_zero(self):
        assert reach_score(make_creator("a", engagement=50.0)) == 0


@pytest.mark.unit
class TestRankCreators:

    def test_orders_by_score_descending(self):
        small = make_creator("small", ig=1000)
        big = make_creator("big", ig=50000)
        medium = make_creator("medium", tt=10000, engagement=10.0)

        ranked = rank_creators([small, big, medium])

        assert [c.username for c in ranked] == ["big", "medium", "small"]

    def test_ties_keep_input_order(self):
        first = make_creator("first", ig=1000)
        second = make_creator("second", tt=1000)
        third = make_creator("third", yt=1000)

        ranked = rank_creators([first, second, third])

        assert [c.username for c in ranked] == ["first", "second", "third"]

    def test_category_filter_is_case_insensitive(self):
        tech = make_creator("tech", ig=100, categories=["Tech", "gaming"])
        food = make_creator("food", ig=900, categories=["food"])

        ranked = rank_creators([tech, food], category="TECH")

        assert [c.username for c in ranked] == ["tech"]

    def test_no_category_keeps_everyone(self):
        pool = [make_creator("a"), make_creator("b", categories=["food"])]
        assert len(rank_creators(pool)) == 2

    def test_empty_pool(self):
        assert rank_creators([], category="tech") == []

    def test_matches_category_handles_delimited_strings(self):
        creator = make_creator("a", categories="Fashion; Beauty")
        assert matches_category(creator, "beauty")
        assert not matches_category(creator, "travel")


@pytest.mark.unit
class TestNormalizeCategories:

    def test_lowercases_trims_and_deduplicates(self):
        assert normalize_categories([" Tech", "tech", "Gaming ", ""]) == ["tech", "gaming"]

    def test_splits_delimited_string(self):
        assert normalize_categories("Food, Travel|travel;Lifestyle") == ["food", "travel", "lifestyle"]

    def test_empty_values(self):
        assert normalize_categories(None) == []
        assert normalize_categories("") == []
        assert normalize_categories([]) == []

    def test_caps_list_length(self):
        many = [f"cat{i}" for i in range(MAX_CATEGORIES + 5)]
        assert len(normalize_categories(many)) == MAX_CATEGORIES

# =============================================
# File: tests/test_matcher.py
# =============================================
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import pytest

from upcycle.schemas import RecyclingTip
from upcycle.services.matcher import is_confident, lookup_tip, match
from upcycle.utils.tips import RECYCLING_TIPS


def test_exact_key_scores_one():
    for key in RECYCLING_TIPS:
        r = match(key)
        assert r.match == key
        assert r.score == 1.0


def test_exact_match_is_case_and_space_insensitive():
    r = match("  Water Bottle ")
    assert r.match == "water bottle"
    assert r.score == 1.0


def test_bottle_hits_the_confidence_boundary():
    r = match("bottle")
    assert r.match == "water bottle"
    assert r.score == pytest.approx(0.5)
    # > 0.5 is required, so this is not authoritative
    assert is_confident(r, "bottle") is False
    assert lookup_tip("bottle") is None


def test_query_containing_key_is_confident():
    r = match("old t-shirt")
    assert r.match == "t-shirt"
    assert r.score == pytest.approx(7 / 11)
    assert is_confident(r, "old t-shirt")
    assert lookup_tip("old t-shirt").key == "t-shirt"


@pytest.mark.parametrize("q", ["", "   ", None])
def test_blank_query_returns_no_match(q):
    r = match(q)
    assert r.match is None
    assert r.score == 0.0


def test_no_overlap_returns_no_match():
    r = match("bicycle tire")
    assert r.match is None
    assert r.score == 0.0


def test_ties_keep_first_seen_key():
    tips = {
        "ab": RecyclingTip(key="ab", suggestions=["x"], how_to="x"),
        "cd": RecyclingTip(key="cd", suggestions=["y"], how_to="y"),
    }
    r = match("abcd", tips)
    assert r.match == "ab"
    assert r.score == pytest.approx(0.5)


def test_scores_stay_in_unit_range_and_match_is_idempotent():
    for q in ["jar", "glass", "a", "paper towel roll", "plastic bags", "cardboard box", "zzz"]:
        first = match(q)
        assert 0.0 <= first.score <= 1.0
        assert match(q) == first


def test_min_score_is_configurable(monkeypatch):
    monkeypatch.setenv("MATCH_MIN_SCORE", "0.4")
    assert is_confident(match("bottle"), "bottle") is True

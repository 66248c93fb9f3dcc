from __future__ import annotations

from lottery_board.models import TIER_ORDER, LotteryResults, Tier, build_tier_meta


def test_tier_order_is_fixed():
    assert [t.value for t in TIER_ORDER] == ["consolation", "third", "second", "first", "special"]


def test_tier_meta_capacities():
    meta = build_tier_meta(45)
    assert [meta[t].max for t in TIER_ORDER] == [45, 5, 3, 1, 1]
    assert meta[Tier.CONSOLATION].digits == 3
    assert all(meta[t].digits == 4 for t in TIER_ORDER[1:])


def test_tier_patterns():
    meta = build_tier_meta()
    consolation = meta[Tier.CONSOLATION].pattern
    four = meta[Tier.SPECIAL].pattern

    assert consolation.match("000")
    assert consolation.match("999")
    assert not consolation.match("12")
    assert not consolation.match("1234")

    assert four.match("0000")
    assert four.match("2999")
    assert not four.match("3000")
    assert not four.match("999")
    assert not four.match("12a4")


def test_progress_counts_digits_for_consolation():
    meta = build_tier_meta(15)
    assert meta[Tier.CONSOLATION].progress(2) == "6/45"
    assert meta[Tier.THIRD].progress(2) == "2/5"


def test_from_raw_normalizes_document():
    meta = build_tier_meta(15)
    raw = {
        "consolation": [" 123 ", None, "", 456],
        "third": "not-a-list",
        "first": ["0001", "0002"],
        "unknown": ["x"],
    }

    results = LotteryResults.from_raw(raw, meta)

    assert results.consolation == ["123", "456"]
    assert results.third == []
    assert results.second == []
    assert results.first == ["0001"]
    assert results.special == []


def test_from_raw_handles_non_dict():
    results = LotteryResults.from_raw(["junk"], build_tier_meta())
    assert results == LotteryResults.empty()


def test_with_entry_returns_copy():
    original = LotteryResults(consolation=["123"])
    updated = original.with_entry(Tier.CONSOLATION, "456")

    assert original.consolation == ["123"]
    assert updated.consolation == ["123", "456"]

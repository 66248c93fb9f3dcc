"""Domain models."""

from lottery_board.models.results import (
    TIER_ORDER,
    LotteryResults,
    Tier,
    TierMeta,
    build_tier_meta,
)

__all__ = ["TIER_ORDER", "LotteryResults", "Tier", "TierMeta", "build_tier_meta"]

"""Prize tiers and the results document.

The whole board state is one document with five ordered tiers. Each tier
holds fixed-width numeric strings, in entry order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Tier(str, Enum):
    CONSOLATION = "consolation"
    THIRD = "third"
    SECOND = "second"
    FIRST = "first"
    SPECIAL = "special"


# Entry order; a tier opens once the previous one is full.
TIER_ORDER: tuple[Tier, ...] = (
    Tier.CONSOLATION,
    Tier.THIRD,
    Tier.SECOND,
    Tier.FIRST,
    Tier.SPECIAL,
)

_THREE_DIGITS = re.compile(r"^\d{3}$")
_FOUR_DIGITS = re.compile(r"^[0-2]\d{3}$")


@dataclass(frozen=True)
class TierMeta:
    """Display label, capacity and number format of one tier."""

    tier: Tier
    label: str
    max: int
    digits: int

    @property
    def pattern(self) -> re.Pattern[str]:
        return _THREE_DIGITS if self.digits == 3 else _FOUR_DIGITS

    @property
    def placeholder(self) -> str:
        return "VD: 528" if self.digits == 3 else "VD: 1456"

    @property
    def is_single(self) -> bool:
        return self.max == 1

    def progress(self, count: int) -> str:
        """Sidebar progress text.

        Consolation counts drawn digits rather than numbers.
        """
        if self.tier is Tier.CONSOLATION:
            return f"{count * 3}/{self.max * 3}"
        return f"{count}/{self.max}"


def build_tier_meta(consolation_max: int = 15) -> dict[Tier, TierMeta]:
    return {
        Tier.CONSOLATION: TierMeta(Tier.CONSOLATION, "Giải khuyến khích", consolation_max, 3),
        Tier.THIRD: TierMeta(Tier.THIRD, "Giải ba", 5, 4),
        Tier.SECOND: TierMeta(Tier.SECOND, "Giải nhì", 3, 4),
        Tier.FIRST: TierMeta(Tier.FIRST, "Giải nhất", 1, 4),
        Tier.SPECIAL: TierMeta(Tier.SPECIAL, "Giải đặc biệt", 1, 4),
    }


@dataclass
class LotteryResults:
    """All recorded numbers, keyed by tier."""

    consolation: list[str] = field(default_factory=list)
    third: list[str] = field(default_factory=list)
    second: list[str] = field(default_factory=list)
    first: list[str] = field(default_factory=list)
    special: list[str] = field(default_factory=list)

    def entries(self, tier: Tier) -> list[str]:
        return getattr(self, tier.value)

    def with_entry(self, tier: Tier, value: str) -> "LotteryResults":
        """Return a copy with ``value`` appended to ``tier``."""

        data = self.to_dict()
        data[tier.value] = [*data[tier.value], value]
        return LotteryResults(**data)

    def to_dict(self) -> dict[str, list[str]]:
        return {t.value: list(self.entries(t)) for t in TIER_ORDER}

    @classmethod
    def empty(cls) -> "LotteryResults":
        return cls()

    @classmethod
    def from_raw(cls, raw: Any, meta: dict[Tier, TierMeta]) -> "LotteryResults":
        """Coerce a stored document into a well-formed one.

        Non-list tiers become empty, items are stringified and trimmed,
        blanks are dropped and each tier is cut to its capacity.
        """

        record = raw if isinstance(raw, dict) else {}
        data: dict[str, list[str]] = {}
        for tier in TIER_ORDER:
            items = record.get(tier.value)
            if not isinstance(items, list):
                items = []
            cleaned = ["" if item is None else str(item).strip() for item in items]
            data[tier.value] = [item for item in cleaned if item][: meta[tier].max]
        return cls(**data)

"""Service layer: tier gating, entry validation and persistence of results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lottery_board.errors import EntryRejectedError, StorageError, ValidationError
from lottery_board.models.results import TIER_ORDER, LotteryResults, Tier, TierMeta, build_tier_meta
from lottery_board.repositories.results_repository import JsonResultsRepository

logger = logging.getLogger(__name__)

# Tiers whose failures also raise a toast (when toasts are enabled).
TOAST_TIERS: frozenset[Tier] = frozenset({Tier.THIRD, Tier.SECOND, Tier.FIRST, Tier.SPECIAL})
SUFFIX_CONFLICT_PREFIX = "3 số cuối"

MSG_LOAD_FAILED = "Không thể tải dữ liệu đã lưu."
MSG_SAVE_FAILED = "Không thể lưu dữ liệu vào file."
MSG_WRONG_ORDER = "Vui lòng nhập đúng thứ tự các nhóm giải."
MSG_BAD_CONSOLATION = "Giải khuyến khích phải là 3 chữ số (000-999)."
MSG_BAD_FOUR_DIGIT = "Giải ba/nhì/nhất/đặc biệt phải là 4 chữ số, số đầu từ 0-2."


def parse_tier(raw: str) -> Tier:
    try:
        return Tier(str(raw).strip().lower())
    except ValueError as e:
        raise ValidationError(f"Unknown prize tier: {raw}") from e


@dataclass(frozen=True)
class EntryOutcome:
    """Result of an accepted submission."""

    results: LotteryResults
    value: str
    message: str


class ResultsService:
    """Results board use-cases."""

    def __init__(
        self,
        repository: JsonResultsRepository,
        consolation_max: int = 15,
        show_toasts: bool = True,
    ) -> None:
        self._repo = repository
        self.meta: dict[Tier, TierMeta] = build_tier_meta(consolation_max)
        self.show_toasts = show_toasts

    # Persistence

    def read_document(self) -> Any:
        return self._repo.load()

    def overwrite_document(self, document: Any) -> None:
        self._repo.save(document)
        logger.info("Results document overwritten")

    def load_results(self) -> LotteryResults:
        return LotteryResults.from_raw(self._repo.load(), self.meta)

    # Gating

    def can_input(self, results: LotteryResults) -> dict[Tier, bool]:
        """Which tiers currently accept numbers.

        Consolation is always open; every later tier opens only once the
        previous one holds exactly its capacity.
        """

        open_tiers = {TIER_ORDER[0]: True}
        for previous, tier in zip(TIER_ORDER, TIER_ORDER[1:]):
            open_tiers[tier] = len(results.entries(previous)) == self.meta[previous].max
        return open_tiers

    def visible_tiers(self, results: LotteryResults) -> list[Tier]:
        open_tiers = self.can_input(results)
        return [t for t in TIER_ORDER if open_tiers[t] or results.entries(t)]

    def is_full(self, results: LotteryResults, tier: Tier) -> bool:
        return len(results.entries(tier)) >= self.meta[tier].max

    # Validation

    def validate_entry(self, results: LotteryResults, tier: Tier, value: str) -> str | None:
        """Return the rejection message for ``value`` in ``tier``, or None."""

        meta = self.meta[tier]
        if not meta.pattern.match(value):
            return MSG_BAD_CONSOLATION if meta.digits == 3 else MSG_BAD_FOUR_DIGIT

        if value in results.entries(tier):
            return f"Số {value} đã tồn tại trong {meta.label}."

        last3 = value[-3:]
        for other in TIER_ORDER:
            for existing in results.entries(other):
                if other is tier and existing == value:
                    continue
                if existing[-3:] == last3:
                    return f"{SUFFIX_CONFLICT_PREFIX} ({last3}) trùng với {self.meta[other].label}."

        return None

    def should_toast(self, tier: Tier, message: str) -> bool:
        if not self.show_toasts:
            return False
        return message.startswith(SUFFIX_CONFLICT_PREFIX) or tier in TOAST_TIERS

    def _reject(self, tier: Tier, message: str) -> EntryRejectedError:
        logger.info("Rejected entry for %s: %s", tier.value, message)
        return EntryRejectedError(message, tier=tier.value)

    # Submission

    def submit_entry(self, tier: Tier, raw_value: Any) -> EntryOutcome:
        """Validate one number, append it to its tier and persist the document.

        Raises:
            EntryRejectedError: the number breaks an ordering/format/uniqueness rule.
            StorageError: the document could not be read or written.
        """

        try:
            results = self.load_results()
        except (OSError, ValueError) as e:
            logger.exception("Failed to load results document")
            raise StorageError(MSG_LOAD_FAILED, details={"tier": tier.value}) from e

        if not self.can_input(results)[tier]:
            raise self._reject(tier, MSG_WRONG_ORDER)

        value = "" if raw_value is None else str(raw_value).strip()
        error = self.validate_entry(results, tier, value)
        if error:
            raise self._reject(tier, error)

        label = self.meta[tier].label
        if self.is_full(results, tier):
            raise self._reject(tier, f"{label} đã đủ số lượng.")

        updated = results.with_entry(tier, value)
        try:
            self._repo.save(updated.to_dict())
        except OSError as e:
            logger.exception("Failed to persist results document")
            raise StorageError(MSG_SAVE_FAILED, details={"tier": tier.value}) from e

        logger.info("Saved %s for %s", value, tier.value)
        return EntryOutcome(
            results=updated,
            value=value,
            message=f"Đã lưu {value} cho {label}.",
        )

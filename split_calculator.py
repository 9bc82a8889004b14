from typing import Dict, List
import logging

from exceptions import InvalidSplitError
from models import PercentageCheck, SplitType

logger = logging.getLogger(__name__)

# Accepted distance from 100 when checking a percentage split
PERCENTAGE_TOLERANCE = 0.1

class SplitCalculator:
    @staticmethod
    def compute_split(transaction, participant_ids: List[str]) -> Dict[str, float]:
        """
        Distribute a transaction amount across the active participants.

        Works for expenses, credits and drafts alike; only ``amount`` and
        ``split`` are read. Percentage splits are applied as given, so a
        mapping that does not total 100 yields shares that do not total the
        amount.

        Args:
            transaction: Object with ``amount`` and ``split`` attributes
            participant_ids: Keys of the participants sharing the transaction

        Returns:
            Mapping of participant key to allocated amount
        """
        if not participant_ids:
            raise InvalidSplitError("Cannot split a transaction across zero participants")

        amount = transaction.amount
        if amount < 0:
            raise InvalidSplitError("Transaction amount must not be negative", {"amount": amount})

        split = transaction.split
        if split.type == SplitType.EVEN:
            share = amount / len(participant_ids)
            return {uid: share for uid in participant_ids}

        if split.type == SplitType.PERCENTAGE:
            percentages = split.percentages or {}
            return {
                uid: amount * percentages.get(uid, 0) / 100
                for uid in participant_ids
            }

        raise InvalidSplitError("Unrecognized split type", {"type": split.type})

    @staticmethod
    def even_percentages(participant_ids: List[str]) -> Dict[str, int]:
        """Whole-number percentages totalling 100; the first participant takes the remainder"""
        if not participant_ids:
            raise InvalidSplitError("Cannot build percentages for zero participants")

        each = 100 // len(participant_ids)
        percentages = {uid: each for uid in participant_ids}
        percentages[participant_ids[0]] = 100 - each * (len(participant_ids) - 1)
        return percentages

    @staticmethod
    def check_percentages(percentages: Dict[str, float], tolerance: float = PERCENTAGE_TOLERANCE) -> PercentageCheck:
        """Report whether a percentage split adds up to 100"""
        total = sum(percentages.values())
        valid = abs(total - 100) <= tolerance
        if not valid:
            logger.debug(f"Percentages total {total}, expected 100")
        return PercentageCheck(total=total, valid=valid)

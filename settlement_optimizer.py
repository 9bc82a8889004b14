from typing import Dict, List, NamedTuple, Optional, Tuple
import logging
import math

from models import Bucket, BucketSummary, Credit, Expense, Settlement
from split_calculator import SplitCalculator

logger = logging.getLogger(__name__)

# Balances within this distance of zero count as settled
SETTLEMENT_TOLERANCE = 0.01

class BalanceTotals(NamedTuple):
    balances: Dict[str, float]
    total_expenses: float
    total_credits: float

def _largest(candidates: Dict[str, float]) -> Tuple[Optional[str], float]:
    """Key with the largest value; ties go to the lexicographically smallest key"""
    best_uid, best_value = None, 0.0
    for uid in sorted(candidates):
        if candidates[uid] > best_value:
            best_uid, best_value = uid, candidates[uid]
    return best_uid, best_value

def _round_cents(amount: float) -> float:
    """Round to cents with halves going up (0.125 -> 0.13)"""
    return math.floor(amount * 100 + 0.5) / 100

class SettlementOptimizer:
    @staticmethod
    def calculate_balances(
        participant_ids: List[str],
        expenses: List[Expense],
        credits: List[Credit],
    ) -> BalanceTotals:
        """Calculate net balance for each participant"""
        balances = {uid: 0.0 for uid in participant_ids}
        total_expenses = 0.0
        total_credits = 0.0

        for expense in expenses:
            total_expenses += expense.amount
            splits = SplitCalculator.compute_split(expense, participant_ids)

            # The payer fronted the money and gets it back
            if expense.paid_by not in balances:
                logger.warning(f"Expense {expense.id} paid by {expense.paid_by}, who is not a participant")
            balances[expense.paid_by] = balances.get(expense.paid_by, 0.0) + expense.amount

            # Everyone sharing the expense owes their portion
            for uid, share in splits.items():
                balances[uid] -= share

        for credit in credits:
            total_credits += credit.amount
            splits = SplitCalculator.compute_split(credit, participant_ids)

            # The receiver hands the money back to the group
            if credit.received_by not in balances:
                logger.warning(f"Credit {credit.id} received by {credit.received_by}, who is not a participant")
            balances[credit.received_by] = balances.get(credit.received_by, 0.0) - credit.amount

            for uid, share in splits.items():
                balances[uid] += share

        return BalanceTotals(balances, total_expenses, total_credits)

    @staticmethod
    def minimize_transactions(balances: Dict[str, float]) -> List[Settlement]:
        """
        Greedy settlement: repeatedly settle the largest debtor with the
        largest creditor until every balance is within tolerance of zero.

        Settlement amounts are rounded to cents; the working balances keep
        full precision so rounding does not accumulate.
        """
        settlements = []
        working = dict(balances)

        while True:
            debtor, debt = _largest({
                uid: -balance for uid, balance in working.items()
                if balance < -SETTLEMENT_TOLERANCE
            })
            creditor, credit = _largest({
                uid: balance for uid, balance in working.items()
                if balance > SETTLEMENT_TOLERANCE
            })

            if debtor is None or creditor is None:
                break

            amount = min(debt, credit)
            settlements.append(Settlement(
                from_participant=debtor,
                to_participant=creditor,
                amount=_round_cents(amount),
            ))
            logger.debug(f"{debtor} pays {creditor} {amount:.2f}")

            working[debtor] += amount
            working[creditor] -= amount

        return settlements

    @staticmethod
    def calculate_bucket_summary(
        bucket: Bucket,
        expenses: List[Expense],
        credits: List[Credit],
    ) -> BucketSummary:
        """Main method: balances, optimal settlements and totals for a bucket"""
        participant_ids = list(bucket.participants)
        totals = SettlementOptimizer.calculate_balances(participant_ids, expenses, credits)
        settlements = SettlementOptimizer.minimize_transactions(totals.balances)

        return BucketSummary(
            balances=totals.balances,
            settlements=settlements,
            total_expenses=totals.total_expenses,
            total_credits=totals.total_credits,
        )

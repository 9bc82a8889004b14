"""
Shared fixtures for the settlement engine tests.
"""

import pytest

from models import Bucket, Credit, Expense, Participant, SplitConfig


def _split(percentages):
    if percentages is None:
        return SplitConfig()
    return SplitConfig(type="percentage", percentages=percentages)


@pytest.fixture
def make_bucket():
    def _make(*uids, currency="USD"):
        return Bucket(
            id="bucket-1",
            name="Trip",
            currency=currency,
            participants={
                uid: Participant(uid=uid, email=f"{uid.lower()}@example.com")
                for uid in uids
            },
        )
    return _make


@pytest.fixture
def make_expense():
    def _make(amount, paid_by, percentages=None, id="e1"):
        return Expense(id=id, title="Dinner", amount=amount, paid_by=paid_by, split=_split(percentages))
    return _make


@pytest.fixture
def make_credit():
    def _make(amount, received_by, percentages=None, id="c1"):
        return Credit(id=id, title="Refund", amount=amount, received_by=received_by, split=_split(percentages))
    return _make

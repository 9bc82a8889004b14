"""
Presentation helpers for rendering a bucket summary.
"""
from typing import Dict, List, Optional

from models import Bucket
from settlement_optimizer import SETTLEMENT_TOLERANCE

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "$",
    "AUD": "$",
    "INR": "₹",
}

def currency_symbol(currency: str) -> str:
    """Symbol for a currency code, or the code itself when unknown"""
    return CURRENCY_SYMBOLS.get(currency, currency)

def participant_name(bucket: Bucket, uid: str) -> str:
    participant = bucket.participants.get(uid)
    if participant is None:
        return "Unknown"
    return participant.display_name or participant.email.split("@")[0]

def balance_label(balance: Optional[float], symbol: str) -> str:
    """Human readable balance: who gets money back, who owes it"""
    balance = balance or 0.0
    if balance > SETTLEMENT_TOLERANCE:
        return f"Gets {symbol}{balance:.2f}"
    if balance < -SETTLEMENT_TOLERANCE:
        return f"Owes {symbol}{abs(balance):.2f}"
    return "Settled"

def format_amount(amount: float, symbol: str) -> str:
    return f"{symbol}{amount:.2f}"

def balance_rows(bucket: Bucket, balances: Dict[str, float], symbol: str) -> List[Dict[str, str]]:
    """
    Table rows for the balances view.

    Bucket participants come first in bucket order, then any other key in
    ``balances`` (a payer or receiver who has since left the bucket).
    """
    uids = list(bucket.participants)
    uids += [uid for uid in balances if uid not in bucket.participants]
    return [
        {
            "Participant": participant_name(bucket, uid),
            "Balance": balance_label(balances.get(uid), symbol),
        }
        for uid in uids
    ]

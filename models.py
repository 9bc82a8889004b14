from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict
from datetime import datetime

class SplitType(str, Enum):
    EVEN = "even"
    PERCENTAGE = "percentage"

class Participant(BaseModel):
    uid: str
    email: str
    display_name: Optional[str] = None
    added_at: Optional[datetime] = None

class SplitConfig(BaseModel):
    type: SplitType = SplitType.EVEN
    percentages: Optional[Dict[str, float]] = None  # uid -> percentage (0-100)

class TransactionDraft(BaseModel):
    """Amount and split policy of a transaction that has not been recorded yet"""
    amount: float = Field(..., ge=0)
    split: SplitConfig = Field(default_factory=SplitConfig)

class Expense(BaseModel):
    id: str
    bucket_id: Optional[str] = None
    title: str = ""
    amount: float = Field(..., gt=0)
    paid_by: str
    split: SplitConfig = Field(default_factory=SplitConfig)
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class Credit(BaseModel):
    id: str
    bucket_id: Optional[str] = None
    title: str = ""
    amount: float = Field(..., gt=0)
    received_by: str
    split: SplitConfig = Field(default_factory=SplitConfig)
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class Bucket(BaseModel):
    id: str
    name: str
    currency: str = "USD"
    participants: Dict[str, Participant] = Field(default_factory=dict)
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class Settlement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_participant: str = Field(..., alias="from")
    to_participant: str = Field(..., alias="to")
    amount: float

class BucketSummary(BaseModel):
    balances: Dict[str, float]
    settlements: List[Settlement]
    total_expenses: float
    total_credits: float

class PercentageCheck(BaseModel):
    total: float
    valid: bool

# ===== API PAYLOADS =====
class BucketSnapshot(BaseModel):
    bucket: Bucket
    expenses: List[Expense] = Field(default_factory=list)
    credits: List[Credit] = Field(default_factory=list)

class SplitPreviewRequest(BaseModel):
    transaction: TransactionDraft
    participant_ids: List[str]

class SplitPreviewResponse(BaseModel):
    splits: Dict[str, float]
    total: float

class PercentageCheckRequest(BaseModel):
    percentages: Dict[str, float]

class DefaultPercentagesRequest(BaseModel):
    participant_ids: List[str]

class DefaultPercentagesResponse(BaseModel):
    percentages: Dict[str, int]

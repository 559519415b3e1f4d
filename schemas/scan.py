from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class ScanRequest(BaseModel):
    # address is optional here so a missing one maps to 400, not 422
    address: Optional[str] = None
    txHash: Optional[str] = None


class PaymentVerification(BaseModel):
    valid: bool
    payer: Optional[str] = None
    amount: Optional[str] = None  # decimal string, 4 places
    reason: Optional[str] = None


class RiskReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    address: str
    risk_score: int
    risk_level: str
    flags: List[str]
    total_transactions: int
    failed_transactions: int
    unique_contracts: int
    ai_explanation: str

    payment_verified: Optional[bool] = None
    paid_by: Optional[str] = None
    amount_paid: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

# app/schemas/payment_instruction.py
from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr
from typing import List, Optional, Union

from app.models.payment import InstructionType, StatusCode, TransactionStatus

class AccountIn(BaseModel):
    id: StrictStr
    balance: Union[StrictInt, StrictFloat]
    currency: StrictStr

class PaymentInstructionRequest(BaseModel):
    accounts: List[AccountIn]
    instruction: StrictStr

class AccountOut(BaseModel):
    id: str
    balance: Union[int, float]
    balance_before: Union[int, float]
    currency: str

class PaymentInstructionResponse(BaseModel):
    type: Optional[InstructionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: TransactionStatus
    status_reason: str
    status_code: StatusCode
    accounts: List[AccountOut] = []

# app/models/payment.py
from pydantic import BaseModel
from typing import Optional, Union
from enum import Enum

class InstructionType(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

class TransactionStatus(str, Enum):
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"

class StatusCode(str, Enum):
    AP00 = "AP00"  # executed immediately
    AP02 = "AP02"  # scheduled for a future date
    SY01 = "SY01"  # missing required keyword
    SY02 = "SY02"  # keywords out of order
    SY03 = "SY03"  # malformed / unparseable instruction
    AM01 = "AM01"  # invalid amount
    CU01 = "CU01"  # currency mismatch
    CU02 = "CU02"  # unsupported currency
    AC01 = "AC01"  # insufficient funds
    AC02 = "AC02"  # debit and credit account identical
    AC03 = "AC03"  # account not found
    AC04 = "AC04"  # malformed account id
    DT01 = "DT01"  # invalid date format

class FailureStage(str, Enum):
    PARSE = "parse"
    VALIDATE = "validate"
    UNEXPECTED = "unexpected"

class FailureKind(str, Enum):
    # parse stage
    MISSING_KEYWORD = "MISSING_KEYWORD"
    INVALID_KEYWORD_ORDER = "INVALID_KEYWORD_ORDER"
    MALFORMED_INSTRUCTION = "MALFORMED_INSTRUCTION"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    # validation stage
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    DECIMAL_AMOUNT = "DECIMAL_AMOUNT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    UNSUPPORTED_CURRENCY = "UNSUPPORTED_CURRENCY"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    SAME_ACCOUNT = "SAME_ACCOUNT"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    # anything else
    UNEXPECTED = "UNEXPECTED"


class Account(BaseModel):
    id: str
    balance: Union[int, float]
    currency: str


class ParsedInstruction(BaseModel):
    """Fields extracted from an instruction. Amount and currency are not validated yet."""
    type: InstructionType
    amount: str
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str] = None


class ValidatedTransaction(BaseModel):
    type: InstructionType
    amount: int
    currency: str
    debit_account: Account
    credit_account: Account
    execute_by: Optional[str] = None


class ExecutionOutcome(BaseModel):
    """
    Result of executing a validated transaction.
    debit_account / credit_account hold the post-execution state; for a pending
    outcome they equal the pre-execution state.
    """
    type: InstructionType
    amount: int
    currency: str
    debit_account: Account
    credit_account: Account
    execute_by: Optional[str] = None
    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    debit_balance_before: Union[int, float]
    credit_balance_before: Union[int, float]


class FailureRecord(BaseModel):
    kind: FailureKind
    stage: FailureStage
    status_reason: str
    status_code: Optional[StatusCode] = None


# Each stage returns either its success value or a FailureRecord
ParseResult = Union[ParsedInstruction, FailureRecord]
ValidationResult = Union[ValidatedTransaction, FailureRecord]

# app/models/__init__.py
from .payment import (
    Account,
    ExecutionOutcome,
    FailureKind,
    FailureRecord,
    FailureStage,
    InstructionType,
    ParsedInstruction,
    ParseResult,
    StatusCode,
    TransactionStatus,
    ValidatedTransaction,
    ValidationResult,
)

__all__ = [
    "Account",
    "ExecutionOutcome",
    "FailureKind",
    "FailureRecord",
    "FailureStage",
    "InstructionType",
    "ParsedInstruction",
    "ParseResult",
    "StatusCode",
    "TransactionStatus",
    "ValidatedTransaction",
    "ValidationResult",
]

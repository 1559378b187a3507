# app/core/messages.py
from app.models.payment import FailureKind

TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"
UNEXPECTED_ERROR = "An unexpected error occurred"
INVALID_REQUEST = "Invalid request payload"

FAILURE_MESSAGES = {
    FailureKind.MISSING_KEYWORD: "Missing required keyword in instruction",
    FailureKind.INVALID_KEYWORD_ORDER: "Invalid keyword order in instruction",
    FailureKind.MALFORMED_INSTRUCTION: "Malformed instruction: unable to parse keywords",
    FailureKind.INVALID_ACCOUNT_ID: "Invalid account ID format",
    FailureKind.INVALID_DATE_FORMAT: "Invalid date format, expected YYYY-MM-DD",
    FailureKind.NEGATIVE_AMOUNT: "Amount cannot be negative",
    FailureKind.DECIMAL_AMOUNT: "Amount must be a whole number, decimals are not allowed",
    FailureKind.INVALID_AMOUNT: "Amount must be a positive integer",
    FailureKind.UNSUPPORTED_CURRENCY: "Unsupported currency",
    FailureKind.ACCOUNT_NOT_FOUND: "Account not found",
    FailureKind.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    FailureKind.CURRENCY_MISMATCH: "Currency mismatch between accounts and instruction",
    FailureKind.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    FailureKind.UNEXPECTED: UNEXPECTED_ERROR,
}


def failure_message(kind: FailureKind) -> str:
    return FAILURE_MESSAGES.get(kind, UNEXPECTED_ERROR)

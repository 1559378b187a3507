# app/services/transaction_validator.py
from typing import List, Optional

from app.core.config import settings
from app.core.messages import failure_message
from app.models.payment import (
    Account,
    FailureKind,
    FailureRecord,
    FailureStage,
    ParsedInstruction,
    ValidatedTransaction,
    ValidationResult,
)

DIGITS = "0123456789"


class TransactionValidationError(Exception):
    def __init__(self, kind: FailureKind):
        super().__init__(failure_message(kind))
        self.kind = kind


def leading_integer(amount_text: Optional[str]) -> Optional[int]:
    """
    Integer read from the start of the raw amount: optional sign, then digits up to
    the first non-digit ('12abc' -> 12, '-5' -> -5, '2.5' -> 2). None when there are
    no leading digits, or too many to convert.
    """
    if not amount_text or not isinstance(amount_text, str):
        return None

    text = amount_text.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    end = 0
    while end < len(text) and text[end] in DIGITS:
        end += 1
    if end == 0:
        return None

    try:
        return sign * int(text[:end])
    except ValueError:
        # More digits than the interpreter converts
        return None


def validate_amount(amount_text: Optional[str]) -> int:
    """Amount must read as a positive whole number."""
    if not amount_text or not isinstance(amount_text, str):
        raise TransactionValidationError(FailureKind.INVALID_AMOUNT)

    # Sign and decimal point are reported before any numeric parsing
    if "-" in amount_text:
        raise TransactionValidationError(FailureKind.NEGATIVE_AMOUNT)
    if "." in amount_text:
        raise TransactionValidationError(FailureKind.DECIMAL_AMOUNT)

    amount = leading_integer(amount_text)
    if amount is None or amount <= 0:
        raise TransactionValidationError(FailureKind.INVALID_AMOUNT)

    return amount


def validate_currency(currency_text: Optional[str]) -> str:
    if not currency_text or not isinstance(currency_text, str):
        raise TransactionValidationError(FailureKind.UNSUPPORTED_CURRENCY)

    currency = currency_text.upper()
    if currency not in settings.SUPPORTED_CURRENCIES:
        raise TransactionValidationError(FailureKind.UNSUPPORTED_CURRENCY)

    return currency


def find_account(accounts: List[Account], account_id: str) -> Optional[Account]:
    """First account whose id is exactly account_id."""
    return next((acc for acc in accounts if acc.id == account_id), None)


def _validate(parsed: ParsedInstruction, accounts: List[Account]) -> ValidatedTransaction:
    amount = validate_amount(parsed.amount)
    currency = validate_currency(parsed.currency)

    debit_account = find_account(accounts, parsed.debit_account)
    credit_account = find_account(accounts, parsed.credit_account)
    if not debit_account or not credit_account:
        raise TransactionValidationError(FailureKind.ACCOUNT_NOT_FOUND)

    if debit_account.id == credit_account.id:
        raise TransactionValidationError(FailureKind.SAME_ACCOUNT)

    debit_currency = debit_account.currency.upper()
    credit_currency = credit_account.currency.upper()
    if debit_currency != credit_currency or debit_currency != currency:
        raise TransactionValidationError(FailureKind.CURRENCY_MISMATCH)

    if debit_account.balance < amount:
        raise TransactionValidationError(FailureKind.INSUFFICIENT_FUNDS)

    return ValidatedTransaction(
        type=parsed.type,
        amount=amount,
        currency=currency,
        debit_account=debit_account,
        credit_account=credit_account,
        execute_by=parsed.execute_by,
    )


def validate_transaction(parsed: ParsedInstruction, accounts: List[Account]) -> ValidationResult:
    """
    Apply business rules to a parsed instruction. Checks run in order and the
    first failure wins: amount, currency, account existence, distinct accounts,
    currency agreement, sufficient funds.
    """
    try:
        return _validate(parsed, accounts)
    except TransactionValidationError as e:
        return FailureRecord(kind=e.kind, stage=FailureStage.VALIDATE, status_reason=str(e))

# app/services/transaction_executor.py
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from app.core.messages import TRANSACTION_PENDING, TRANSACTION_SUCCESSFUL
from app.models.payment import (
    ExecutionOutcome,
    StatusCode,
    TransactionStatus,
    ValidatedTransaction,
)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _execution_date(execute_by: str) -> Optional[date]:
    """
    Turn a format-checked YYYY-MM-DD string into a date. Days past the end of
    the month roll over into the next month (2025-02-31 -> 2025-03-03).
    Returns None for year 0000, which sorts before any real date.
    """
    year, month, day = (int(part) for part in execute_by.split("-"))
    if year < 1:
        return None
    return date(year, month, 1) + timedelta(days=day - 1)


def is_future_date(execute_by: Optional[str], today: Optional[date] = None) -> bool:
    """True when execute_by is strictly after today (UTC, day granularity)."""
    if not execute_by:
        return False

    execution_date = _execution_date(execute_by)
    if execution_date is None:
        return False

    return execution_date > (today or utc_today())


def execute_transaction(validated: ValidatedTransaction, today: Optional[date] = None) -> ExecutionOutcome:
    """
    Execute now or schedule for later. Accounts on the returned outcome are new
    objects holding the post-execution balances; the validated transaction and
    the caller's accounts are not modified.
    """
    debit_balance_before = validated.debit_account.balance
    credit_balance_before = validated.credit_account.balance

    if is_future_date(validated.execute_by, today):
        status = TransactionStatus.PENDING
        status_code = StatusCode.AP02
        status_reason = TRANSACTION_PENDING
        debit_account = validated.debit_account.model_copy()
        credit_account = validated.credit_account.model_copy()
    else:
        status = TransactionStatus.SUCCESSFUL
        status_code = StatusCode.AP00
        status_reason = TRANSACTION_SUCCESSFUL
        debit_account = validated.debit_account.model_copy(
            update={"balance": debit_balance_before - validated.amount}
        )
        credit_account = validated.credit_account.model_copy(
            update={"balance": credit_balance_before + validated.amount}
        )

    return ExecutionOutcome(
        type=validated.type,
        amount=validated.amount,
        currency=validated.currency,
        debit_account=debit_account,
        credit_account=credit_account,
        execute_by=validated.execute_by,
        status=status,
        status_code=status_code,
        status_reason=status_reason,
        debit_balance_before=debit_balance_before,
        credit_balance_before=credit_balance_before,
    )

# app/services/response_formatter.py
from typing import Dict, List, Optional, Union

from app.core.messages import failure_message
from app.models.payment import (
    Account,
    ExecutionOutcome,
    FailureKind,
    FailureRecord,
    ParsedInstruction,
    StatusCode,
    TransactionStatus,
)
from app.schemas.payment_instruction import AccountOut, PaymentInstructionResponse
from app.services.status_classifier import UNPARSEABLE_CODES
from app.services.transaction_validator import leading_integer


def _request_positions(accounts: List[Account]) -> Dict[str, int]:
    positions = {}
    for index, acc in enumerate(accounts):
        positions.setdefault(acc.id, index)
    return positions


def _in_request_order(involved: List[AccountOut], accounts: List[Account]) -> List[AccountOut]:
    """Sort involved accounts by where they appear in the request, unknown ids last."""
    positions = _request_positions(accounts)
    return sorted(involved, key=lambda acc: positions.get(acc.id, len(accounts)))


def format_success_response(outcome: ExecutionOutcome, accounts: List[Account]) -> PaymentInstructionResponse:
    """Response for an executed or scheduled transaction."""
    involved = [
        AccountOut(
            id=outcome.debit_account.id,
            balance=outcome.debit_account.balance,
            balance_before=outcome.debit_balance_before,
            currency=outcome.debit_account.currency.upper(),
        ),
        AccountOut(
            id=outcome.credit_account.id,
            balance=outcome.credit_account.balance,
            balance_before=outcome.credit_balance_before,
            currency=outcome.credit_account.currency.upper(),
        ),
    ]

    return PaymentInstructionResponse(
        type=outcome.type,
        amount=outcome.amount,
        currency=outcome.currency,
        debit_account=outcome.debit_account.id,
        credit_account=outcome.credit_account.id,
        execute_by=outcome.execute_by or None,
        status=outcome.status,
        status_reason=outcome.status_reason,
        status_code=outcome.status_code,
        accounts=_in_request_order(involved, accounts),
    )


def format_error_response(
    failure: FailureRecord,
    parsed: Optional[ParsedInstruction],
    accounts: Optional[List[Account]],
) -> PaymentInstructionResponse:
    """
    Response for a failed instruction.

    Without a parse result (or for SY01/SY02/SY03) nothing about the instruction
    is echoed back. Otherwise the parsed fields are returned, together with the
    referenced accounts when both ids resolve; their balances are unchanged.
    """
    status_code = failure.status_code or StatusCode.SY03
    status_reason = failure.status_reason or failure_message(FailureKind.UNEXPECTED)

    if parsed is None or status_code in UNPARSEABLE_CODES:
        return PaymentInstructionResponse(
            status=TransactionStatus.FAILED,
            status_reason=status_reason,
            status_code=status_code,
            accounts=[],
        )

    involved = []
    if accounts and parsed.debit_account and parsed.credit_account:
        debit_acc = next((acc for acc in accounts if acc.id == parsed.debit_account), None)
        credit_acc = next((acc for acc in accounts if acc.id == parsed.credit_account), None)
        if debit_acc and credit_acc:
            # Debit entry then credit entry, even when both name the same account
            matched = [debit_acc, credit_acc]
            involved = _in_request_order(
                [
                    AccountOut(
                        id=acc.id,
                        balance=acc.balance,
                        balance_before=acc.balance,
                        currency=acc.currency.upper(),
                    )
                    for acc in matched
                ],
                accounts,
            )

    return PaymentInstructionResponse(
        type=parsed.type,
        amount=leading_integer(parsed.amount),
        currency=parsed.currency.upper() if parsed.currency else None,
        debit_account=parsed.debit_account or None,
        credit_account=parsed.credit_account or None,
        execute_by=parsed.execute_by or None,
        status=TransactionStatus.FAILED,
        status_reason=status_reason,
        status_code=status_code,
        accounts=involved,
    )


def format_response(
    result: Union[ExecutionOutcome, FailureRecord],
    accounts: Optional[List[Account]],
    parsed: Optional[ParsedInstruction] = None,
) -> PaymentInstructionResponse:
    """Single entry point: failures need the parse result, when there is one, to echo it."""
    if isinstance(result, FailureRecord):
        return format_error_response(result, parsed, accounts)
    return format_success_response(result, accounts or [])

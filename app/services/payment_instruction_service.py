# app/services/payment_instruction_service.py
from datetime import date
from typing import Any, List, Optional
import logging

from pydantic import ValidationError

from app.core.messages import INVALID_REQUEST, UNEXPECTED_ERROR
from app.models.payment import (
    Account,
    FailureKind,
    FailureRecord,
    FailureStage,
)
from app.schemas.payment_instruction import PaymentInstructionRequest, PaymentInstructionResponse
from app.services.instruction_parser import parse_instruction
from app.services.response_formatter import format_response
from app.services.status_classifier import classify_failure
from app.services.transaction_executor import execute_transaction
from app.services.transaction_validator import validate_transaction

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    return f"{INVALID_REQUEST}: {details}" if details else INVALID_REQUEST


class PaymentInstructionService:
    """
    Runs one payment instruction through parse -> validate -> execute -> format.

    Every outcome, including faults nobody anticipated, comes back as a
    PaymentInstructionResponse; nothing is raised to the caller.
    """

    def __init__(self, today: Optional[date] = None):
        # Fixed "today" for scheduling decisions; None means the current UTC date
        self.today = today

    def process(self, payload: Any) -> PaymentInstructionResponse:
        try:
            request = PaymentInstructionRequest.model_validate(payload)
            accounts = [Account(**acc.model_dump()) for acc in request.accounts]
            return self._run_pipeline(request.instruction, accounts)

        except ValidationError as e:
            logger.warning(f"❌ Invalid payment instruction payload: {e.error_count()} error(s)")
            return self._unexpected_failure(_describe_validation_error(e))

        except Exception as e:
            logger.exception("process-payment-instruction-error", extra={"error": str(e)})
            return self._unexpected_failure(str(e) or UNEXPECTED_ERROR)

    def _run_pipeline(self, instruction: str, accounts: List[Account]) -> PaymentInstructionResponse:
        parsed = parse_instruction(instruction)
        if isinstance(parsed, FailureRecord):
            failure = classify_failure(parsed)
            logger.warning(
                "parse-error",
                extra={
                    "error": failure.status_reason,
                    "status_code": failure.status_code.value,
                    "instruction": instruction,
                },
            )
            return format_response(failure, accounts)

        validated = validate_transaction(parsed, accounts)
        if isinstance(validated, FailureRecord):
            failure = classify_failure(validated)
            logger.warning(
                "validation-error",
                extra={
                    "error": failure.status_reason,
                    "status_code": failure.status_code.value,
                    "parsed": parsed.model_dump(mode="json"),
                },
            )
            return format_response(failure, accounts, parsed)

        outcome = execute_transaction(validated, self.today)
        logger.info(
            f"✅ {outcome.type.value} {outcome.amount} {outcome.currency} "
            f"{outcome.debit_account.id} -> {outcome.credit_account.id}: {outcome.status.value}"
        )
        return format_response(outcome, accounts)

    def _unexpected_failure(self, reason: str) -> PaymentInstructionResponse:
        failure = classify_failure(
            FailureRecord(kind=FailureKind.UNEXPECTED, stage=FailureStage.UNEXPECTED, status_reason=reason)
        )
        return format_response(failure, [])


def process_payment_instruction(payload: Any, today: Optional[date] = None) -> PaymentInstructionResponse:
    return PaymentInstructionService(today=today).process(payload)


# Dependency for easy use in endpoints
def get_payment_instruction_service() -> PaymentInstructionService:
    return PaymentInstructionService()

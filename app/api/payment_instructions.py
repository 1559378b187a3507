# app/api/payment_instructions.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
import json
import logging

from app.models.payment import TransactionStatus
from app.schemas.payment_instruction import PaymentInstructionResponse
from app.services.payment_instruction_service import (
    PaymentInstructionService,
    get_payment_instruction_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payment-instructions", tags=["Payment Instructions"])

ACCEPTED_STATUSES = {TransactionStatus.SUCCESSFUL, TransactionStatus.PENDING}


@router.post("", response_model=PaymentInstructionResponse)
async def process_payment_instruction(
    request: Request,
    service: PaymentInstructionService = Depends(get_payment_instruction_service),
):
    """
    Parse, validate and execute a payment instruction.

    - 200: transaction executed (AP00) or scheduled (AP02)
    - 400: instruction rejected; status_code says why
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        # The core reports an absent payload as SY03
        logger.warning(f"Request body is not valid JSON: {e}")
        payload = None

    response = service.process(payload)

    http_status = (
        status.HTTP_200_OK
        if response.status in ACCEPTED_STATUSES
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=http_status, content=response.model_dump(mode="json"))

# tests/conftest.py
import pytest
from datetime import date
from fastapi.testclient import TestClient

from app.main import app
from app.models.payment import Account, ParsedInstruction, InstructionType
from app.services.payment_instruction_service import (
    PaymentInstructionService,
    get_payment_instruction_service,
)

# Scheduling decisions in tests are made against this date
FIXED_TODAY = date(2025, 6, 15)

@pytest.fixture
def accounts():
    """Two NGN accounts, A1 funded and A2 empty, in request order."""
    return [
        Account(id="A1", balance=1000, currency="NGN"),
        Account(id="A2", balance=0, currency="NGN"),
    ]

@pytest.fixture
def accounts_payload():
    return [
        {"id": "A1", "balance": 1000, "currency": "NGN"},
        {"id": "A2", "balance": 0, "currency": "NGN"},
    ]

@pytest.fixture
def make_parsed():
    """Build a ParsedInstruction with sensible defaults."""
    def _make(**overrides):
        fields = {
            "type": InstructionType.DEBIT,
            "amount": "500",
            "currency": "NGN",
            "debit_account": "A1",
            "credit_account": "A2",
            "execute_by": None,
        }
        fields.update(overrides)
        return ParsedInstruction(**fields)
    return _make

@pytest.fixture
def service():
    return PaymentInstructionService(today=FIXED_TODAY)

@pytest.fixture(scope="function")
def client():
    """Test client against the real application."""
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def fixed_date_client(service):
    """Test client whose service treats FIXED_TODAY as the current date."""
    app.dependency_overrides[get_payment_instruction_service] = lambda: service
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()

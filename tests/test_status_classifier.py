# tests/test_status_classifier.py
import pytest

from app.models.payment import FailureKind, FailureRecord, FailureStage, StatusCode
from app.services.status_classifier import classify_failure, resolve_status_code


def _failure(stage, kind):
    return FailureRecord(kind=kind, stage=stage, status_reason="reason")


class TestStatusClassifier:
    """Failure kind and stage to status code"""

    @pytest.mark.parametrize("kind,code", [
        (FailureKind.MISSING_KEYWORD, StatusCode.SY01),
        (FailureKind.INVALID_KEYWORD_ORDER, StatusCode.SY02),
        (FailureKind.MALFORMED_INSTRUCTION, StatusCode.SY03),
        (FailureKind.INVALID_DATE_FORMAT, StatusCode.DT01),
        (FailureKind.INVALID_ACCOUNT_ID, StatusCode.AC04),
    ])
    def test_parse_stage(self, kind, code):
        assert resolve_status_code(_failure(FailureStage.PARSE, kind)) == code

    @pytest.mark.parametrize("kind,code", [
        (FailureKind.NEGATIVE_AMOUNT, StatusCode.AM01),
        (FailureKind.DECIMAL_AMOUNT, StatusCode.AM01),
        (FailureKind.INVALID_AMOUNT, StatusCode.AM01),
        (FailureKind.CURRENCY_MISMATCH, StatusCode.CU01),
        (FailureKind.UNSUPPORTED_CURRENCY, StatusCode.CU02),
        (FailureKind.INSUFFICIENT_FUNDS, StatusCode.AC01),
        (FailureKind.SAME_ACCOUNT, StatusCode.AC02),
        (FailureKind.ACCOUNT_NOT_FOUND, StatusCode.AC03),
    ])
    def test_validation_stage(self, kind, code):
        assert resolve_status_code(_failure(FailureStage.VALIDATE, kind)) == code

    def test_unexpected_is_sy03(self):
        failure = _failure(FailureStage.UNEXPECTED, FailureKind.UNEXPECTED)
        assert resolve_status_code(failure) == StatusCode.SY03

    def test_business_kind_outside_validation_stage_is_sy03(self):
        failure = _failure(FailureStage.PARSE, FailureKind.INSUFFICIENT_FUNDS)
        assert resolve_status_code(failure) == StatusCode.SY03

    def test_same_failure_same_code(self):
        failure = _failure(FailureStage.VALIDATE, FailureKind.CURRENCY_MISMATCH)
        codes = {resolve_status_code(failure) for _ in range(5)}
        assert codes == {StatusCode.CU01}

    def test_classify_returns_copy_with_code(self):
        failure = _failure(FailureStage.PARSE, FailureKind.MISSING_KEYWORD)
        classified = classify_failure(failure)

        assert classified.status_code == StatusCode.SY01
        assert classified.status_reason == failure.status_reason
        assert failure.status_code is None

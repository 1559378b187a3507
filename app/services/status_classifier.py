# app/services/status_classifier.py
"""
Maps failures to protocol status codes.

Rules are checked top to bottom and the first match wins. Parse-stage keyword
problems are settled first, then date and account-id format problems (from any
stage), then validation-stage business rules. Anything left over is SY03.
"""
from typing import FrozenSet, NamedTuple

from app.models.payment import FailureKind, FailureRecord, FailureStage, StatusCode

ANY_STAGE = frozenset(FailureStage)


class StatusRule(NamedTuple):
    stages: FrozenSet[FailureStage]
    kinds: FrozenSet[FailureKind]
    status_code: StatusCode

    def matches(self, failure: FailureRecord) -> bool:
        return failure.stage in self.stages and failure.kind in self.kinds


def _rule(stages, kinds, status_code: StatusCode) -> StatusRule:
    return StatusRule(frozenset(stages), frozenset(kinds), status_code)


STATUS_RULES = (
    _rule([FailureStage.PARSE], [FailureKind.INVALID_KEYWORD_ORDER], StatusCode.SY02),
    _rule([FailureStage.PARSE], [FailureKind.MISSING_KEYWORD], StatusCode.SY01),
    _rule([FailureStage.PARSE], [FailureKind.MALFORMED_INSTRUCTION], StatusCode.SY03),
    _rule(ANY_STAGE, [FailureKind.INVALID_DATE_FORMAT], StatusCode.DT01),
    _rule(ANY_STAGE, [FailureKind.INVALID_ACCOUNT_ID], StatusCode.AC04),
    _rule(
        [FailureStage.VALIDATE],
        [FailureKind.NEGATIVE_AMOUNT, FailureKind.DECIMAL_AMOUNT, FailureKind.INVALID_AMOUNT],
        StatusCode.AM01,
    ),
    _rule([FailureStage.VALIDATE], [FailureKind.CURRENCY_MISMATCH], StatusCode.CU01),
    _rule([FailureStage.VALIDATE], [FailureKind.UNSUPPORTED_CURRENCY], StatusCode.CU02),
    _rule([FailureStage.VALIDATE], [FailureKind.INSUFFICIENT_FUNDS], StatusCode.AC01),
    _rule([FailureStage.VALIDATE], [FailureKind.SAME_ACCOUNT], StatusCode.AC02),
    _rule([FailureStage.VALIDATE], [FailureKind.ACCOUNT_NOT_FOUND], StatusCode.AC03),
)

UNPARSEABLE_CODES = frozenset({StatusCode.SY01, StatusCode.SY02, StatusCode.SY03})


def resolve_status_code(failure: FailureRecord) -> StatusCode:
    for rule in STATUS_RULES:
        if rule.matches(failure):
            return rule.status_code
    return StatusCode.SY03


def classify_failure(failure: FailureRecord) -> FailureRecord:
    """Return a copy of the failure with its status code filled in."""
    return failure.model_copy(update={"status_code": resolve_status_code(failure)})

# app/services/instruction_parser.py
"""
Payment instruction parser.

Understands two instruction shapes, matched case-insensitively:

    DEBIT [amount] [currency] FROM ACCOUNT [id] FOR CREDIT TO ACCOUNT [id] [ON [date]]
    CREDIT [amount] [currency] TO ACCOUNT [id] FOR DEBIT FROM ACCOUNT [id] [ON [date]]

Parsing uses keyword search and slicing only, no regular expressions. Amount and
currency come back as raw text; the transaction validator decides whether they
are acceptable.
"""
import logging
from typing import Optional

from app.core.messages import failure_message
from app.models.payment import (
    FailureKind,
    FailureRecord,
    FailureStage,
    InstructionType,
    ParsedInstruction,
    ParseResult,
)

logger = logging.getLogger(__name__)

ACCOUNT_ID_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-@."
DIGITS = "0123456789"
ON_MARKER = " ON "


class InstructionParseError(Exception):
    """Internal to the parser; always converted to a FailureRecord before returning."""

    def __init__(self, kind: FailureKind):
        super().__init__(failure_message(kind))
        self.kind = kind


def normalize_instruction(instruction) -> str:
    """Collapse runs of spaces and drop blank tokens. Non-text input yields ''."""
    if not instruction or not isinstance(instruction, str):
        return ""
    return " ".join(part for part in instruction.split(" ") if part.strip())


def _is_digits(text: str) -> bool:
    return len(text) > 0 and all(char in DIGITS for char in text)


def is_valid_account_id(account_id: Optional[str]) -> bool:
    """Letters, digits, hyphens, periods and @ only."""
    if not account_id or not isinstance(account_id, str):
        return False
    return all(char in ACCOUNT_ID_CHARS for char in account_id)


def is_valid_date_format(date_text: Optional[str]) -> bool:
    """
    Check a YYYY-MM-DD string: three numeric segments of length 4/2/2, month 1-12
    and day 1-31. Day is not checked against the length of the month.
    """
    if not date_text or not isinstance(date_text, str):
        return False

    parts = date_text.split("-")
    if len(parts) != 3:
        return False

    year, month, day = parts
    if len(year) != 4 or len(month) != 2 or len(day) != 2:
        return False
    if not (_is_digits(year) and _is_digits(month) and _is_digits(day)):
        return False

    return 1 <= int(month) <= 12 and 1 <= int(day) <= 31


class Grammar:
    """
    One instruction shape. Both shapes have the same skeleton: a type keyword,
    amount and currency, then two keyword-introduced account ids and an
    optional ON date. They differ in the keywords and in which account comes first.
    """

    def __init__(self, instruction_type: InstructionType, first_marker: str, second_marker: str, first_is_debit: bool):
        self.instruction_type = instruction_type
        self.prefix = f"{instruction_type.value} "
        self.first_marker = first_marker
        self.second_marker = second_marker
        self.first_is_debit = first_is_debit

    def matches(self, upper_instruction: str) -> bool:
        return upper_instruction.startswith(self.prefix)

    def parse(self, clean: str, upper: str) -> ParsedInstruction:
        # Keyword positions come from the upper-cased copy, values from the normalized text
        first_index = upper.find(self.first_marker)
        second_index = upper.find(self.second_marker)
        on_index = upper.find(ON_MARKER)

        if first_index == -1 or second_index == -1:
            raise InstructionParseError(FailureKind.MISSING_KEYWORD)

        if second_index < first_index:
            raise InstructionParseError(FailureKind.INVALID_KEYWORD_ORDER)

        amount_currency = clean[len(self.prefix):first_index].strip().split(" ")
        if len(amount_currency) < 2:
            raise InstructionParseError(FailureKind.MALFORMED_INSTRUCTION)

        amount = amount_currency[0]
        currency = " ".join(amount_currency[1:])

        first_account = clean[first_index + len(self.first_marker):second_index].strip()
        second_end = on_index if on_index != -1 else len(clean)
        second_account = clean[second_index + len(self.second_marker):second_end].strip()

        execute_by = None
        if on_index != -1:
            date_text = clean[on_index + len(ON_MARKER):].strip()
            if date_text:
                if not is_valid_date_format(date_text):
                    raise InstructionParseError(FailureKind.INVALID_DATE_FORMAT)
                execute_by = date_text

        if self.first_is_debit:
            debit_account, credit_account = first_account, second_account
        else:
            debit_account, credit_account = second_account, first_account

        if not is_valid_account_id(debit_account) or not is_valid_account_id(credit_account):
            raise InstructionParseError(FailureKind.INVALID_ACCOUNT_ID)

        return ParsedInstruction(
            type=self.instruction_type,
            amount=amount,
            currency=currency,
            debit_account=debit_account,
            credit_account=credit_account,
            execute_by=execute_by,
        )

    def serialize(self, parsed: ParsedInstruction) -> str:
        """Render a parsed instruction back into this grammar's canonical text."""
        if self.first_is_debit:
            first_account, second_account = parsed.debit_account, parsed.credit_account
        else:
            first_account, second_account = parsed.credit_account, parsed.debit_account

        text = (
            f"{self.prefix}{parsed.amount} {parsed.currency}"
            f"{self.first_marker}{first_account}"
            f"{self.second_marker}{second_account}"
        )
        if parsed.execute_by:
            text = f"{text}{ON_MARKER}{parsed.execute_by}"
        return text


DEBIT_GRAMMAR = Grammar(InstructionType.DEBIT, " FROM ACCOUNT ", " FOR CREDIT TO ACCOUNT ", first_is_debit=True)
CREDIT_GRAMMAR = Grammar(InstructionType.CREDIT, " TO ACCOUNT ", " FOR DEBIT FROM ACCOUNT ", first_is_debit=False)
GRAMMARS = (DEBIT_GRAMMAR, CREDIT_GRAMMAR)


def _parse(instruction) -> ParsedInstruction:
    if not instruction or not isinstance(instruction, str):
        raise InstructionParseError(FailureKind.MALFORMED_INSTRUCTION)

    clean = normalize_instruction(instruction)
    if not clean:
        raise InstructionParseError(FailureKind.MALFORMED_INSTRUCTION)

    upper = clean.upper()
    for grammar in GRAMMARS:
        if grammar.matches(upper):
            return grammar.parse(clean, upper)

    raise InstructionParseError(FailureKind.MALFORMED_INSTRUCTION)


def parse_instruction(instruction) -> ParseResult:
    """Parse raw instruction text into a ParsedInstruction, or a parse-stage FailureRecord."""
    try:
        return _parse(instruction)
    except InstructionParseError as e:
        return FailureRecord(kind=e.kind, stage=FailureStage.PARSE, status_reason=str(e))
    except Exception as e:
        logger.debug(f"Unclassified parser error, treating as malformed: {e}", exc_info=True)
        return FailureRecord(
            kind=FailureKind.MALFORMED_INSTRUCTION,
            stage=FailureStage.PARSE,
            status_reason=failure_message(FailureKind.MALFORMED_INSTRUCTION),
        )


def serialize_instruction(parsed: ParsedInstruction) -> str:
    grammar = DEBIT_GRAMMAR if parsed.type == InstructionType.DEBIT else CREDIT_GRAMMAR
    return grammar.serialize(parsed)

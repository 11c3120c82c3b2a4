from __future__ import annotations

import logging
import re
from typing import List, Optional

from hackasm.errors import ParseError
from hackasm.model import AddressInstruction, ComputeInstruction, Instruction, LabelInstruction


logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"
SYMBOL_RE = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")
DECIMAL_RE = re.compile(r"[0-9]+")


def is_symbol(value: str) -> bool:
    return SYMBOL_RE.fullmatch(value) is not None


def is_decimal(value: str) -> bool:
    return DECIMAL_RE.fullmatch(value) is not None


def _strip_comment(line: str) -> str:
    index = line.find(COMMENT_MARKER)
    if index != -1:
        line = line[:index]
    return line.strip()


def _parse_address(line: str, line_no: int, raw_line: str) -> AddressInstruction:
    value = line[1:].strip()
    if not value:
        raise ParseError("Missing value after '@'", line_no, raw_line)
    if not is_decimal(value) and not is_symbol(value):
        raise ParseError(f"Invalid address value: {value}", line_no, raw_line)
    return AddressInstruction(value=value, line_no=line_no, text=raw_line)


def _parse_label(line: str, line_no: int, raw_line: str) -> LabelInstruction:
    if not line.endswith(")") or len(line) < 2:
        raise ParseError(f"Unterminated label: {line}", line_no, raw_line)
    value = line[1:-1].strip()
    if not is_symbol(value):
        raise ParseError(f"Invalid label name: {value or '(empty)'}", line_no, raw_line)
    return LabelInstruction(value=value, line_no=line_no, text=raw_line)


def _parse_compute(line: str, line_no: int, raw_line: str) -> ComputeInstruction:
    equals = line.count("=")
    semicolons = line.count(";")
    if not equals and not semicolons:
        raise ParseError(f"Unrecognized instruction: {line}", line_no, raw_line)
    if equals > 1 or semicolons > 1 or (equals and semicolons and line.index(";") < line.index("=")):
        raise ParseError(f"Unexpected split count in: {line}", line_no, raw_line)

    dest: Optional[str] = None
    jump: Optional[str] = None
    rest = line
    if equals:
        head, rest = rest.split("=", 1)
        dest = head.strip()
    if semicolons:
        rest, tail = rest.split(";", 1)
        jump = tail.strip()
    comp = rest.strip()

    for field_name, part in (("dest", dest), ("comp", comp), ("jump", jump)):
        if part == "":
            raise ParseError(f"Missing {field_name} in: {line}", line_no, raw_line)
    return ComputeInstruction(dest=dest, comp=comp, jump=jump, line_no=line_no, text=raw_line)


def parse_line(raw_line: str, line_no: int = 0) -> Optional[Instruction]:
    line = _strip_comment(raw_line)
    if not line or line.startswith("/"):
        return None
    if line.startswith("@"):
        return _parse_address(line, line_no, raw_line)
    if line.startswith("("):
        return _parse_label(line, line_no, raw_line)
    return _parse_compute(line, line_no, raw_line)


def parse_assembly(text: str) -> List[Instruction]:
    instructions: List[Instruction] = []
    # lines end at "\n" only
    for idx, raw_line in enumerate(text.split("\n"), start=1):
        instruction = parse_line(raw_line.rstrip("\r"), idx)
        if instruction is not None:
            instructions.append(instruction)
    logger.debug("Parsed %d instructions", len(instructions))
    return instructions

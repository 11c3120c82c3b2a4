from __future__ import annotations

from typing import Dict, Optional

from hackasm.errors import OutOfRangeLiteralError, UnknownMnemonicError
from hackasm.model import AddressInstruction, ComputeInstruction, Instruction, LabelInstruction
from hackasm.parser import is_decimal
from hackasm.symbols import SymbolTable


WORD_BITS = 16
MAX_LITERAL = (1 << (WORD_BITS - 1)) - 1

# a-bit followed by c1..c6
COMP_TABLE: Dict[str, int] = {
    "0": 0b0101010,
    "1": 0b0111111,
    "-1": 0b0111010,
    "D": 0b0001100,
    "A": 0b0110000,
    "!D": 0b0001101,
    "!A": 0b0110001,
    "-D": 0b0001111,
    "-A": 0b0110011,
    "D+1": 0b0011111,
    "A+1": 0b0110111,
    "D-1": 0b0001110,
    "A-1": 0b0110010,
    "D+A": 0b0000010,
    "D-A": 0b0010011,
    "A-D": 0b0000111,
    "D&A": 0b0000000,
    "D|A": 0b0010101,
    "M": 0b1110000,
    "!M": 0b1110001,
    "-M": 0b1110011,
    "M+1": 0b1110111,
    "M-1": 0b1110010,
    "D+M": 0b1000010,
    "D-M": 0b1010011,
    "M-D": 0b1000111,
    "D&M": 0b1000000,
    "D|M": 0b1010101,
}

DEST_TABLE: Dict[Optional[str], int] = {
    None: 0b000,
    "M": 0b001,
    "D": 0b010,
    "MD": 0b011,
    "A": 0b100,
    "AM": 0b101,
    "AD": 0b110,
    "AMD": 0b111,
}

JUMP_TABLE: Dict[Optional[str], int] = {
    None: 0b000,
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}


def _lookup(table: Dict, field_name: str, mnemonic: Optional[str], instr: ComputeInstruction) -> int:
    try:
        return table[mnemonic]
    except KeyError:
        raise UnknownMnemonicError(field_name, str(mnemonic), instr.line_no, instr.text) from None


def encode_address(value: int, instr: Optional[AddressInstruction] = None, symbol: Optional[str] = None) -> str:
    if not 0 <= value <= MAX_LITERAL:
        line_no = instr.line_no if instr else 0
        text = instr.text if instr else ""
        raise OutOfRangeLiteralError(value, line_no, text, symbol)
    return f"0{value:015b}"


def encode_compute(instr: ComputeInstruction) -> str:
    comp = _lookup(COMP_TABLE, "comp", instr.comp, instr)
    dest = _lookup(DEST_TABLE, "dest", instr.dest, instr)
    jump = _lookup(JUMP_TABLE, "jump", instr.jump, instr)
    return f"111{comp:07b}{dest:03b}{jump:03b}"


def encode_instruction(instr: Instruction, symbols: SymbolTable) -> Optional[str]:
    """Encode one instruction as a 16 character bit string.

    Labels produce ``None``. Symbolic addresses are looked up in
    ``symbols``; an unknown name is bound there as the next variable.
    """
    if isinstance(instr, LabelInstruction):
        return None
    if isinstance(instr, AddressInstruction):
        if is_decimal(instr.value):
            return encode_address(int(instr.value), instr)
        return encode_address(symbols.resolve(instr.value), instr, instr.value)
    if isinstance(instr, ComputeInstruction):
        return encode_compute(instr)
    raise TypeError(f"Not an instruction: {instr!r}")

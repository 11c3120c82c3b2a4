import pytest

from hackasm.encoder import COMP_TABLE, DEST_TABLE, JUMP_TABLE, encode_address, encode_instruction
from hackasm.errors import OutOfRangeLiteralError, UnknownMnemonicError
from hackasm.model import AddressInstruction, ComputeInstruction, LabelInstruction
from hackasm.symbols import SymbolTable


COMP_BITS = {
    "0": "0101010", "1": "0111111", "-1": "0111010",
    "D": "0001100", "A": "0110000", "M": "1110000",
    "!D": "0001101", "!A": "0110001", "!M": "1110001",
    "-D": "0001111", "-A": "0110011", "-M": "1110011",
    "D+1": "0011111", "A+1": "0110111", "M+1": "1110111",
    "D-1": "0001110", "A-1": "0110010", "M-1": "1110010",
    "D+A": "0000010", "D-A": "0010011", "A-D": "0000111",
    "D+M": "1000010", "D-M": "1010011", "M-D": "1000111",
    "D&A": "0000000", "D|A": "0010101",
    "D&M": "1000000", "D|M": "1010101",
}
DEST_BITS = {"M": "001", "D": "010", "MD": "011", "A": "100", "AM": "101", "AD": "110", "AMD": "111"}
JUMP_BITS = {"JGT": "001", "JEQ": "010", "JGE": "011", "JLT": "100", "JNE": "101", "JLE": "110", "JMP": "111"}


def test_tables_match_reference_bits():
    assert {k: f"{v:07b}" for k, v in COMP_TABLE.items()} == COMP_BITS
    assert {k: f"{v:03b}" for k, v in DEST_TABLE.items()} == {None: "000", **DEST_BITS}
    assert {k: f"{v:03b}" for k, v in JUMP_TABLE.items()} == {None: "000", **JUMP_BITS}


@pytest.mark.parametrize("comp, bits", sorted(COMP_BITS.items()))
def test_comp_encoding(comp, bits):
    word = encode_instruction(ComputeInstruction(dest=None, comp=comp, jump=None), SymbolTable())
    assert word == f"111{bits}000000"


def test_dest_and_jump_encoding():
    symbols = SymbolTable()
    for dest, bits in DEST_BITS.items():
        assert encode_instruction(ComputeInstruction(dest, "0", None), symbols) == f"1110101010{bits}000"
    for jump, bits in JUMP_BITS.items():
        assert encode_instruction(ComputeInstruction(None, "0", jump), symbols) == f"1110101010000{bits}"


@pytest.mark.parametrize(
    "instr, field_name",
    [
        (ComputeInstruction(None, "D*A", None), "comp"),
        (ComputeInstruction("DM", "D", None), "dest"),
        (ComputeInstruction("d", "D", None), "dest"),
        (ComputeInstruction(None, "0", "JMPX"), "jump"),
    ],
)
def test_unknown_mnemonics(instr, field_name):
    with pytest.raises(UnknownMnemonicError) as exc:
        encode_instruction(instr, SymbolTable())
    assert exc.value.field == field_name


def test_address_literals():
    symbols = SymbolTable()
    assert encode_instruction(AddressInstruction("0"), symbols) == "0000000000000000"
    assert encode_instruction(AddressInstruction("32767"), symbols) == "0111111111111111"
    assert symbols.variables == {}


def test_literal_out_of_range():
    with pytest.raises(OutOfRangeLiteralError) as exc:
        encode_instruction(AddressInstruction("32768", line_no=4, text="@32768"), SymbolTable())
    assert exc.value.value == 32768
    assert exc.value.symbol is None
    assert exc.value.line_no == 4
    with pytest.raises(OutOfRangeLiteralError):
        encode_address(-1)


def test_symbols_resolve_and_bind_variables():
    symbols = SymbolTable()
    assert encode_instruction(AddressInstruction("KBD"), symbols) == "0110000000000000"
    assert encode_instruction(AddressInstruction("i"), symbols) == "0000000000010000"
    assert encode_instruction(AddressInstruction("i"), symbols) == "0000000000010000"
    assert symbols.next_variable_address == 17


def test_label_has_no_encoding():
    assert encode_instruction(LabelInstruction("LOOP"), SymbolTable()) is None


def test_variable_past_address_space_names_the_symbol():
    symbols = SymbolTable(variable_base=32768)
    with pytest.raises(OutOfRangeLiteralError) as exc:
        encode_instruction(AddressInstruction("overflow", line_no=9, text="@overflow"), symbols)
    assert exc.value.symbol == "overflow"
    assert exc.value.message == "Address of symbol overflow out of range (0..32767): 32768"
    assert exc.value.line_no == 9

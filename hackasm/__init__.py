from hackasm.assembler import assemble, translate
from hackasm.errors import (
    AssemblerError,
    DuplicateLabelError,
    OutOfRangeLiteralError,
    ParseError,
    UnknownMnemonicError,
)

__all__ = [
    "AssemblerError",
    "DuplicateLabelError",
    "OutOfRangeLiteralError",
    "ParseError",
    "UnknownMnemonicError",
    "assemble",
    "translate",
]

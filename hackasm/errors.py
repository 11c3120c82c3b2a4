from __future__ import annotations

from typing import Optional


class AssemblerError(Exception):
    def __init__(self, message: str, line_no: int = 0, text: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no
        self.text = text


class ParseError(AssemblerError):
    pass


class DuplicateLabelError(AssemblerError):
    def __init__(self, symbol: str, line_no: int = 0, text: str = "") -> None:
        super().__init__(f"Duplicate label: {symbol}", line_no, text)
        self.symbol = symbol


class UnknownMnemonicError(AssemblerError):
    def __init__(self, field: str, mnemonic: str, line_no: int = 0, text: str = "") -> None:
        super().__init__(f"Unknown {field} mnemonic: {mnemonic}", line_no, text)
        self.field = field
        self.mnemonic = mnemonic


class OutOfRangeLiteralError(AssemblerError):
    def __init__(self, value: int, line_no: int = 0, text: str = "", symbol: Optional[str] = None) -> None:
        if symbol is None:
            message = f"Literal out of range (0..32767): {value}"
        else:
            message = f"Address of symbol {symbol} out of range (0..32767): {value}"
        super().__init__(message, line_no, text)
        self.value = value
        self.symbol = symbol

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from hackasm.parser import is_symbol
from hackasm.symbols import PREDEFINED_SYMBOLS


logger = logging.getLogger(__name__)

MAX_ADDRESS = 0x7FFF


class SymbolSheetError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class SymbolSheet:
    """Extra symbols made available next to the fixed predefined ones."""

    schema_version: int
    name: str
    description: str
    symbols: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for symbol, address in self.symbols.items():
            _validate_symbol(symbol, address)


def load_symbol_sheet(path: Path | str) -> SymbolSheet:
    resolved = Path(path).expanduser().resolve()
    data = _load_json(resolved)
    sheet = _validate_sheet(data, resolved)
    logger.debug("Loaded symbol sheet %r with %d symbols from %s", sheet.name, len(sheet.symbols), resolved)
    return sheet


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise SymbolSheetError(f"Symbol sheet not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise SymbolSheetError(f"Invalid JSON in {path}: {exc}") from exc
    except OSError as exc:
        raise SymbolSheetError(f"Failed to read symbol sheet: {exc}") from exc


def _validate_sheet(data: dict, path: Path) -> SymbolSheet:
    if not isinstance(data, dict):
        raise SymbolSheetError("Symbol sheet must be a JSON object.")
    schema_version = data.get("schema_version")
    if not isinstance(schema_version, int) or isinstance(schema_version, bool):
        raise SymbolSheetError("schema_version must be an integer.")
    if schema_version != 1:
        raise SymbolSheetError(f"Unsupported schema_version: {schema_version}")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SymbolSheetError("name is required and must be a string.")
    description = data.get("description") or ""
    if description and not isinstance(description, str):
        raise SymbolSheetError("description must be a string if provided.")
    symbols_data = data.get("symbols")
    if not isinstance(symbols_data, dict) or not symbols_data:
        raise SymbolSheetError(f"symbols must be a non-empty object in {path}.")
    return SymbolSheet(
        schema_version=schema_version,
        name=name.strip(),
        description=description.strip(),
        symbols=dict(symbols_data),
    )


def _validate_symbol(symbol: str, address: object) -> int:
    if not isinstance(symbol, str) or not is_symbol(symbol):
        raise SymbolSheetError(f"Invalid symbol name: {symbol!r}")
    if symbol in PREDEFINED_SYMBOLS:
        raise SymbolSheetError(f"Symbol {symbol} is predefined and cannot be redefined.")
    if not isinstance(address, int) or isinstance(address, bool):
        raise SymbolSheetError(f"Symbol {symbol} address must be an integer.")
    if not 0 <= address <= MAX_ADDRESS:
        raise SymbolSheetError(f"Symbol {symbol} address out of range: {address}")
    return address

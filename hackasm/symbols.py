from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from hackasm.errors import DuplicateLabelError
from hackasm.model import Instruction, LabelInstruction


logger = logging.getLogger(__name__)

VARIABLE_BASE_ADDRESS = 16

PREDEFINED_SYMBOLS: Dict[str, int] = {
    **{f"R{n}": n for n in range(16)},
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": 16384,
    "KBD": 24576,
}


class SymbolTable:
    """Name to address bindings for a single translation run.

    Seeded with the fixed predefined symbols plus any ``extra`` names, then
    filled with labels by ``build_symbol_table`` and with variables lazily
    by ``resolve`` while encoding. A bound name is never rebound.
    """

    def __init__(self, extra: Optional[Dict[str, int]] = None, variable_base: int = VARIABLE_BASE_ADDRESS) -> None:
        self._symbols: Dict[str, int] = dict(PREDEFINED_SYMBOLS)
        for name, address in (extra or {}).items():
            if name in PREDEFINED_SYMBOLS:
                raise ValueError(f"Cannot redefine predefined symbol: {name}")
            self._symbols[name] = address
        self.predefined = frozenset(self._symbols)
        self.labels: Dict[str, int] = {}
        self.variables: Dict[str, int] = {}
        self.next_variable_address = variable_base

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def get(self, name: str) -> Optional[int]:
        return self._symbols.get(name)

    def add_label(self, label: LabelInstruction, address: int) -> None:
        if label.value in self._symbols:
            raise DuplicateLabelError(label.value, label.line_no, label.text)
        self._symbols[label.value] = address
        self.labels[label.value] = address
        logger.debug("line %d: label %s -> %d", label.line_no, label.value, address)

    def resolve(self, name: str) -> int:
        """Return the address bound to ``name``, binding a new variable on first sight."""
        address = self._symbols.get(name)
        if address is not None:
            return address
        address = self.next_variable_address
        self.next_variable_address += 1
        self._symbols[name] = address
        self.variables[name] = address
        logger.debug("variable %s -> %d", name, address)
        return address

    def as_dict(self) -> Dict[str, int]:
        return dict(self._symbols)


def build_symbol_table(
    instructions: Iterable[Instruction],
    extra: Optional[Dict[str, int]] = None,
) -> SymbolTable:
    table = SymbolTable(extra)
    address = 0
    for instruction in instructions:
        if isinstance(instruction, LabelInstruction):
            table.add_label(instruction, address)
        else:
            address += 1
    return table

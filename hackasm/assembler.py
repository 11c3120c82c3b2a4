from __future__ import annotations

import logging
from typing import List, Optional

from hackasm.encoder import encode_instruction
from hackasm.parser import parse_assembly
from hackasm.symbols import build_symbol_table
from hackasm.symbolsheet import SymbolSheet


logger = logging.getLogger(__name__)


def assemble(source_text: str, sheet: Optional[SymbolSheet] = None) -> List[str]:
    instructions = parse_assembly(source_text)
    # labels must all be bound before the first variable is handed out
    symbols = build_symbol_table(instructions, sheet.symbols if sheet else None)

    words: List[str] = []
    for instruction in instructions:
        word = encode_instruction(instruction, symbols)
        if word is not None:
            words.append(word)
    logger.debug(
        "Encoded %d words (%d labels, %d variables)",
        len(words),
        len(symbols.labels),
        len(symbols.variables),
    )
    return words


def translate(source_text: str, sheet: Optional[SymbolSheet] = None) -> str:
    return "".join(f"{word}\n" for word in assemble(source_text, sheet))

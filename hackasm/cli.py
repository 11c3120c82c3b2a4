from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from hackasm.assembler import translate
from hackasm.errors import AssemblerError
from hackasm.symbolsheet import SymbolSheet, SymbolSheetError, load_symbol_sheet


logger = logging.getLogger("hackasm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hackasm", description="Translate Hack assembly into Hack machine code.")
    parser.add_argument("source", help="assembly source file (.asm)")
    parser.add_argument("-o", "--output", help="write machine code to this file instead of stdout")
    parser.add_argument("--symbols", help="JSON symbol sheet with extra predefined symbols")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    source_path = Path(args.source)
    try:
        source_text = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", source_path, exc)
        return 1

    sheet: Optional[SymbolSheet] = None
    if args.symbols:
        try:
            sheet = load_symbol_sheet(args.symbols)
        except SymbolSheetError as exc:
            logger.error(exc.message)
            return 1

    try:
        output = translate(source_text, sheet)
    except AssemblerError as exc:
        logger.error("%s:%d: %s", source_path, exc.line_no, exc.message)
        if exc.text:
            logger.error("    %s", exc.text.strip())
        return 1

    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", args.output, exc)
            return 1
        logger.info("Wrote %d words to %s", output.count("\n"), args.output)
    else:
        print(output, end="")
    return 0

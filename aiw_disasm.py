#!/usr/bin/env python3
"""Command-line interface for the AIW ``ADV_98`` script disassembler."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from aiwdisasm import (
    Disassembler,
    DisassemblyError,
    KnowledgeBase,
    ScriptContainer,
    make_decoder,
)
from aiwdisasm.opcodes import iter_opcodes
from aiwdisasm.text import DEFAULT_ENCODING


logger = logging.getLogger("aiw_disasm")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Script file to disassemble",
    )
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        default=None,
        help="Override the default <input>.txt output path",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Codec of the string pool (default: %(default)s)",
    )
    parser.add_argument(
        "--errors",
        default="replace",
        help="Codec error handler used while decoding strings (default: %(default)s)",
    )
    parser.add_argument(
        "--annotations",
        type=Path,
        default=None,
        help="JSON file renaming placeholder opcode mnemonics",
    )
    parser.add_argument(
        "--list-opcodes",
        action="store_true",
        help="Print the opcode table and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeat for debug output)",
    )
    args = parser.parse_args(argv)
    if args.input is None and not args.list_opcodes:
        parser.error("an input script is required unless --list-opcodes is given")
    return args


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def validate_inputs(input_path: Path) -> None:
    if not input_path.is_file():
        raise SystemExit(f"missing input file: {input_path}")


def resolve_output_path(args: argparse.Namespace) -> Path:
    if args.out is not None:
        return args.out
    return args.input.with_name(args.input.name + ".txt")


def print_opcode_table(knowledge: KnowledgeBase) -> None:
    print("opcode  mnemonic            shape          size  handler   handler2  flags  cost  summary")
    for spec in iter_opcodes():
        info = knowledge.lookup(spec.opcode)
        mnemonic = info.mnemonic if info else spec.mnemonic
        summary = info.summary if info and info.summary else ""
        print(
            f"0x{spec.opcode:02X}    {mnemonic:<19} {spec.shape.name.lower():<14} "
            f"{spec.size:<5} 0x{spec.handler:06X}  0x{spec.handler2:06X}  "
            f"{spec.flags:<6} {spec.time_cost:<5} {summary}".rstrip()
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        knowledge = KnowledgeBase.load(args.annotations)
    except ValueError as exc:
        logger.error("%s: invalid annotation file: %s", args.annotations, exc)
        return 2
    if args.list_opcodes:
        print_opcode_table(knowledge)
        return 0

    validate_inputs(args.input)
    try:
        decoder = make_decoder(args.encoding, args.errors)
    except LookupError as exc:
        logger.error("%s", exc)
        return 2

    output_path = resolve_output_path(args)
    disassembler = Disassembler(decoder, knowledge=knowledge)
    try:
        container = ScriptContainer.load(args.input)
        disassembler.write_listing(container, output_path)
    except DisassemblyError as exc:
        logger.error("%s: %s", args.input, exc)
        return 1

    logger.info("decoded %s (%d bytes)", args.input, len(container))
    print(f"listing written to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

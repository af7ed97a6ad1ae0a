"""CLI entrypoint for the Portuguese crossword generator."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from cruzadas.core.exceptions import CellInputError, CrosswordError, ResultsSinkError
from cruzadas.data.word_bank import STRATEGIES, WordBank, WordBankConfig, parse_word_entries, read_word_file
from cruzadas.engine.generator import PuzzleConfig, PuzzleGenerator
from cruzadas.engine.session import PuzzleSession, SessionConfig
from cruzadas.engine.validator import PuzzleValidator
from cruzadas.io.results import LoggingResultsSink, WebhookResultsSink
from cruzadas.io.serialization import dumps
from cruzadas.io.store import DEFAULT_STORE_DIR, JsonFileStore
from cruzadas.utils.logger import configure_logging, get_logger
from cruzadas.utils.pretty import pretty_print_puzzle, print_puzzle_stats


LOGGER = get_logger("cruzadas.cli")

PLAY_HELP = """Comandos:
  <linha> <coluna> <letra>   escreve uma letra
  limpar <linha> <coluna>    apaga uma casa
  novo                       gera outra cruzadinha
  mostrar                    mostra grelha e pistas
  sair                       termina
"""


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play Portuguese crosswords",
    )
    parser.add_argument("--size", type=positive_int, default=13, help="Grid side length in cells")
    parser.add_argument("--count", type=positive_int, default=10, help="Target number of placed words")
    parser.add_argument("--min-length", type=positive_int, default=3, help="Shortest usable word length")
    parser.add_argument("--max-attempts", type=positive_int, default=10, help="Placement attempts before giving up")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit word bank (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--category",
        action="append",
        metavar="NAME",
        help="Restrict the built-in bank to a category (repeatable)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=STRATEGIES,
        default="balanced",
        help="Candidate selection strategy",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--check", action="store_true", help="Validate the generated puzzle")
    parser.add_argument("--stats", action="store_true", help="Print grid and word statistics")
    parser.add_argument("--play", action="store_true", help="Play interactively in the terminal")
    parser.add_argument("--new", action="store_true", help="With --play, discard the saved puzzle")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory for the saved game",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_word_bank(args: argparse.Namespace) -> WordBank:
    user_words: List = []
    if args.words:
        user_words.extend(parse_word_entries(args.words))
    if args.words_file:
        user_words.extend(read_word_file(args.words_file))
    # Categories only exist in the built-in bank.
    config = WordBankConfig(
        min_length=args.min_length,
        max_length=args.size,
        categories=None if user_words else args.category,
        strategy=args.strategy,
        seed=args.seed,
    )
    if user_words:
        return WordBank(user_words, config)
    return WordBank(config=config)


def build_results_sink():
    if os.environ.get("CRUZADAS_WEBHOOK_URL"):
        try:
            return WebhookResultsSink()
        except ResultsSinkError as exc:
            LOGGER.warning("Webhook sink unavailable: %s", exc)
    return LoggingResultsSink()


def play(session: PuzzleSession, start_new: bool, stream=None, read_line=input) -> None:
    stream = stream or sys.stdout
    puzzle = session.new_puzzle() if start_new else session.start()
    pretty_print_puzzle(puzzle, show_solution=False, stream=stream)
    print(PLAY_HELP, file=stream)

    while True:
        try:
            line = read_line("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        parts = line.split()
        command = parts[0].lower()
        if command in {"sair", "quit"}:
            break
        if command in {"mostrar", "show"}:
            pretty_print_puzzle(session.puzzle, show_solution=False, stream=stream)
            continue
        if command in {"novo", "new"}:
            pretty_print_puzzle(session.new_puzzle(), show_solution=False, stream=stream)
            continue

        try:
            if command in {"limpar", "clear"} and len(parts) == 3:
                session.clear_cell(int(parts[1]), int(parts[2]))
            elif len(parts) == 3:
                session.enter_letter(int(parts[0]), int(parts[1]), parts[2])
            else:
                print(PLAY_HELP, file=stream)
                continue
        except ValueError:
            print("Linha e coluna devem ser números", file=stream)
            continue
        except CellInputError as exc:
            print(str(exc), file=stream)
            continue

        completed, total = session.progress
        print(f"{completed}/{total} palavras completas", file=stream)
        if session.is_completed:
            print("Parabéns! Cruzadinha completa.", file=stream)
            pretty_print_puzzle(session.puzzle, show_solution=False, stream=stream)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.new and not args.play:
        parser.error("--new only applies together with --play")

    config = PuzzleConfig(
        grid_size=args.size,
        target_word_count=args.count,
        min_word_length=args.min_length,
        max_attempts=args.max_attempts,
        categories=args.category,
        strategy=args.strategy,
        seed=args.seed,
    )

    try:
        word_bank = build_word_bank(args)
        if args.play:
            store = JsonFileStore(args.store_dir)
            with PuzzleSession(
                SessionConfig(puzzle=config),
                store,
                word_bank=word_bank,
                results_sink=build_results_sink(),
            ) as session:
                play(session, start_new=args.new)
            return

        result = PuzzleGenerator(config, word_bank).generate()
    except CrosswordError as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc

    puzzle = result.puzzle
    pretty_print_puzzle(puzzle)
    if args.stats:
        print_puzzle_stats(puzzle)
    if result.skipped:
        LOGGER.info("Words without a valid placement: %s", ", ".join(result.skipped))

    if args.output:
        args.output.write_text(dumps(puzzle), encoding="utf-8")
        LOGGER.info("Puzzle written to %s", args.output)

    if args.check:
        validation = PuzzleValidator().validate(puzzle)
        if not validation.ok:
            for message in validation.messages:
                print(f"INVALID: {message}")
            raise SystemExit(1)
        print("Puzzle OK")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Command line front end for the rhyme engine."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional, Sequence

from rhymer.config import RhymerSettings
from rhymer.core import DictionaryLoadError, RhymeEngine
from rhymer.utils.logging_config import configure_logging
from rhymer.utils.observability import get_logger

EXIT_LOAD_FAILURE = 2

_logger = get_logger(__name__).bind(component="cli")


def _normalize_phonemes(values: Sequence[str]) -> List[str]:
    """Accept ``K AE T`` as separate tokens or as ``K,AE,T``."""

    phonemes: List[str] = []
    for value in values:
        phonemes.extend(part.strip().upper() for part in value.split(",") if part.strip())
    return phonemes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rhymer",
        description="Check rhymes and list rhyming words from a pronunciation dictionary.",
    )
    parser.add_argument(
        "--dict",
        dest="dict_path",
        metavar="PATH",
        help="Dictionary file with one 'WORD PH PH ...' entry per line "
        "(defaults to $RHYMER_DICT_PATH, then the CMU dictionary).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Only list words whose rhyme key matches exactly, not longer keys ending in it.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of plain text.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to $RHYMER_LOG_LEVEL, then WARNING).",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    pronounce = commands.add_parser("pronounce", help="Show the pronunciations of a word.")
    pronounce.add_argument("word")

    check = commands.add_parser("check", help="Print 1, 0 or -1 for whether two words rhyme.")
    check.add_argument("first")
    check.add_argument("second")

    check_phonemes = commands.add_parser(
        "check-phonemes", help="Print 1, 0 or -1 for whether a word rhymes with phonemes."
    )
    check_phonemes.add_argument("word")
    check_phonemes.add_argument("phonemes", nargs="+", metavar="PHONEME")

    find = commands.add_parser("find", help="List words rhyming with a word.")
    find.add_argument("word")

    find_phonemes = commands.add_parser("find-phonemes", help="List words rhyming with phonemes.")
    find_phonemes.add_argument("phonemes", nargs="+", metavar="PHONEME")

    reduce_cmd = commands.add_parser("reduce", help="Show the rhymable part of a phoneme sequence.")
    reduce_cmd.add_argument("phonemes", nargs="+", metavar="PHONEME")
    reduce_cmd.add_argument(
        "--last-syllable",
        action="store_true",
        help="Reduce to the final syllable's rime instead of the full tail.",
    )
    return parser


def _run_command(engine: RhymeEngine, args: argparse.Namespace) -> Any:
    if args.command == "pronounce":
        return engine.pronounce(args.word)
    if args.command == "check":
        return int(engine.rhymes_word(args.first, args.second))
    if args.command == "check-phonemes":
        return int(engine.rhymes_phonetic(args.word, _normalize_phonemes(args.phonemes)))
    if args.command == "find":
        return sorted(engine.find_rhymes_by_word(args.word))
    if args.command == "find-phonemes":
        return sorted(engine.find_rhymes(_normalize_phonemes(args.phonemes)))
    raise ValueError(f"unknown command {args.command!r}")


def _format_text(command: str, result: Any) -> str:
    if command == "pronounce":
        return "\n".join(" ".join(variant) for variant in result)
    if command == "reduce":
        return " ".join(result)
    if isinstance(result, list):
        return "\n".join(str(item) for item in result)
    return str(result)


def _emit(args: argparse.Namespace, result: Any) -> None:
    if args.json:
        json.dump(result, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    text = _format_text(args.command, result)
    if text:
        print(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = RhymerSettings.from_env().with_overrides(
        dict_path=args.dict_path,
        strict_rhymes=args.strict,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level or "WARNING")

    # Reductions need no dictionary.
    if args.command == "reduce":
        phonemes = _normalize_phonemes(args.phonemes)
        if args.last_syllable:
            reduced = RhymeEngine.last_syllable_reduce(phonemes)
        else:
            reduced = RhymeEngine.full_tail_reduce(phonemes)
        _emit(args, list(reduced))
        return 0

    try:
        engine = RhymeEngine.from_settings(settings)
    except DictionaryLoadError as exc:
        _logger.error("Could not load dictionary", context={"error": str(exc)})
        print(f"rhymer: {exc}", file=sys.stderr)
        return EXIT_LOAD_FAILURE

    _emit(args, _run_command(engine, args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

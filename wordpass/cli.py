"""WordPass command-line interface.

Usage examples:
    python -m wordpass check tiger lily 2024
    python -m wordpass generate tiger lily river -c 5
    python -m wordpass generate tiger lily --seed 7 --show-rules
    python -m wordpass score 'Tiger#Lily42!'
"""

import argparse
import logging
import random
import sys

from wordpass import RULE_NAMES, assemble_password, score_password, validate_word

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordpass",
        description="Build memorable passwords from your own words.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Validate candidate words")
    check_p.add_argument("words", nargs="+", help="Words to validate")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Build passwords from words")
    gen_p.add_argument("words", nargs="*", help="Words to combine, in order")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--seed", type=int,
        help="Seed the random source for reproducible output",
    )
    gen_p.add_argument(
        "-r", "--show-rules",
        action="store_true",
        help="List the strength rules each password passes",
    )

    # ── score ─────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Score existing passwords")
    score_p.add_argument("passwords", nargs="+", help="Passwords to score")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        if args.count < 1:
            parser.error("--count must be at least 1")
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _print_rules(rules: dict) -> None:
    for key, passed in rules.items():
        mark = "+" if passed else "x"
        print(f"            [{mark}] {RULE_NAMES[key]}")


def _cmd_check(args: argparse.Namespace) -> int:
    all_valid = True
    for word in args.words:
        result = validate_word(word)
        if result["is_valid"]:
            print(f"  Valid    '{word}'")
        else:
            all_valid = False
            print(f"  Invalid  '{word}'")
            for err in result["errors"]:
                print(f"            ! {err}")

    return 0 if all_valid else 1


def _cmd_generate(args: argparse.Namespace) -> int:
    words = [w for w in args.words if w.strip()]
    if not words:
        print("Error: provide at least one non-empty word", file=sys.stderr)
        return 1

    for word in words:
        if not validate_word(word)["is_valid"]:
            print(f"Warning: '{word}' is a weak word but will still be used", file=sys.stderr)

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.debug("Generating %d password(s) from %d word(s)", args.count, len(words))

    for _ in range(args.count):
        pwd = assemble_password(words, rng)
        report = score_password(pwd)
        print(f"  {pwd}  ({report['label']}, {report['passed']}/{report['total']} rules)")
        if args.show_rules:
            _print_rules(report["rules"])

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    for pwd in args.passwords:
        report = score_password(pwd)
        filled = round(report["percentage"] / 20)
        bar = "#" * filled + "-" * (5 - filled)
        print(f"  '{pwd}'  [{bar}] {report['label']} ({report['passed']}/{report['total']} rules)")
        _print_rules(report["rules"])

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entrypoint for HKID generation and validation."""
from __future__ import annotations

import argparse
import sys

from hkid_checker.application.dto import GenerationRequest, ValidationRequest
from hkid_checker.application.use_cases import (
    GenerateHkidUseCase,
    ValidateHkidUseCase,
    build_context,
)
from hkid_checker.domain.errors import HkidError
from hkid_checker.domain.symbols import parse_symbol
from hkid_checker.logger import logger
from hkid_checker.presentation.report import catalog_to_rows, render_csv, render_html, render_table

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hkid-checker", description="Generate and validate Hong Kong Identity Card numbers")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a random valid HKID")
    generate.add_argument("--prefix", type=str, help="One or two letter prefix (random when omitted)")
    generate.add_argument("--allow-unknown", action="store_true", help="Accept prefixes outside the official catalog")

    validate = subparsers.add_parser("validate", help="Validate an HKID such as A123456(3)")
    validate.add_argument("hkid", type=str, help="HKID text to validate")
    validate.add_argument("--allow-unknown", action="store_true", help="Accept prefixes outside the official catalog")
    validate.add_argument("--allow-bare-check", action="store_true", help="Accept a check character without parentheses")

    prefixes = subparsers.add_parser("prefixes", help="List the official prefix catalog")
    prefixes.add_argument("--format", choices=("table", "csv", "html"), default="table")

    symbol = subparsers.add_parser("symbol", help="Explain a symbol printed on an HKID card")
    symbol.add_argument("code", type=str, help="Card symbol such as ***, A, L2 or H1")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        if args.command == "generate":
            return _generate(args)
        if args.command == "validate":
            return _validate(args)
    except HkidError as exc:
        logger.debug("%s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.command == "prefixes":
        rows = catalog_to_rows(build_context().catalog)
        if args.format == "csv":
            sys.stdout.write(render_csv(rows).decode("utf-8"))
        elif args.format == "html":
            print(render_html(rows))
        else:
            print(render_table(rows))
        return EXIT_OK

    info = parse_symbol(args.code)
    print(f"{info.code}\t{info.kind}\t{info.message}")
    return EXIT_OK


def _generate(args: argparse.Namespace) -> int:
    use_case = GenerateHkidUseCase(build_context())
    response = use_case.execute(GenerationRequest(prefix=args.prefix, must_exist_in_enum=not args.allow_unknown))
    print(response.text)
    return EXIT_OK


def _validate(args: argparse.Namespace) -> int:
    context = build_context(require_parentheses=False if args.allow_bare_check else None)
    response = ValidateHkidUseCase(context).execute(
        ValidationRequest(text=args.hkid, must_exist_in_enum=not args.allow_unknown)
    )
    outcome = response.outcome
    if outcome.is_valid:
        print(f"{outcome.canonical}\tvalid")
        return EXIT_OK
    print(f"{outcome.canonical}\tinvalid (expected check character {outcome.expected_check_char})")
    return EXIT_INVALID


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

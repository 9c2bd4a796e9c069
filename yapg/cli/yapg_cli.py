#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from yapg.core.charsets import CharsetSpec
from yapg.core.error_dialect import format_error_text
from yapg.core.models import DEFAULT_LENGTH, DEFAULT_NUMBER, GenerationRequest
from yapg.core.password_service import generate_passwords


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="yapg", description="Generate random passphrases")
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=DEFAULT_NUMBER,
        help=f"number (count) of passwords to print (default: {DEFAULT_NUMBER})",
    )
    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=DEFAULT_LENGTH,
        help=f"length of each password (default: {DEFAULT_LENGTH})",
    )
    parser.add_argument("-a", "--add", dest="added_chars", default="", help="additional characters to use")
    parser.add_argument("-q", "--quiet", action="store_true", help="don't print safety warnings")
    parser.add_argument(
        "charsets",
        nargs="?",
        default=None,
        help="charset abbreviations: L U N M P D X, or A (alpha) and S (special); default: alphanumerics, - and _",
    )
    return parser.parse_args(argv)


def build_request(args: argparse.Namespace) -> GenerationRequest:
    if args.charsets is None:
        spec = CharsetSpec.std64()
    else:
        spec = CharsetSpec.parse(args.charsets)
    spec += args.added_chars
    return GenerationRequest(alphabet=spec.construct(), length=args.length, count=args.number)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        request = build_request(args)
        result = generate_passwords(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    if not args.quiet:
        for warning in result.warnings:
            print(warning, file=sys.stderr)
    for line in result.as_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

import docx2text
from docx2text.extractors.data_types import DocxParseResult


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx2text",
        description="Extract the text of a .docx file to stdout (or JSON with --json).",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the .docx file to extract.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit text, paragraphs, images and warnings as JSON (images omitted by default).",
    )
    parser.add_argument(
        "--images",
        action="store_true",
        help="With --json, include embedded images as data URIs.",
    )
    parser.add_argument(
        "--decode-entities",
        action="store_true",
        help="Decode XML entities (&amp;, &#169; ...) in the extracted text.",
    )
    return parser


def _emit_warnings(result: DocxParseResult) -> None:
    for warning in result.warnings:
        print(f"docx2text: warning: {warning}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"docx2text: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    try:
        if args.images and not args.json:
            raise ValueError("--images requires --json")
        result = next(
            docx2text.read_file(args.path, decode_entities=args.decode_entities)
        )
        if args.json:
            json.dump(result.to_dict(include_images=bool(args.images)), sys.stdout)
        else:
            sys.stdout.write(result.get_full_text())
        sys.stdout.write("\n")
    except Exception as exc:
        print(f"docx2text: {exc}", file=sys.stderr)
        return 1

    # Warnings go to stderr after the output, outside the error path
    _emit_warnings(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

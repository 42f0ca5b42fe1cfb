"""Command-line interface for falcogen."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from .emitter import convert
from .io_utils import read_source, warn, write_text
from .models import ConverterOptions, load_options
from .preview import write_preview


def _resolve_options(args: argparse.Namespace) -> ConverterOptions:
    """Merge the optional YAML file with flags given on the command line."""

    options = load_options(Path(args.config)) if args.config else ConverterOptions()
    data = options.model_dump()
    if getattr(args, "indent", None) is not None:
        data["indent_size"] = args.indent
    if getattr(args, "body_only", False):
        data["body_only"] = True
    try:
        return ConverterOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid options: {exc}") from exc


def _handle_convert(args: argparse.Namespace) -> None:
    options = _resolve_options(args)
    input_path = Path(args.input) if args.input else None
    code = convert(read_source(input_path), options)
    if not code:
        warn(f"No output produced for {args.input or 'stdin'}.")

    if args.out:
        out_path = write_text(Path(args.out), code + "\n", force=args.force)
        print(f"Wrote Falco.Markup to {out_path}")
        return
    sys.stdout.write(code + "\n" if code else "")


def _handle_preview(args: argparse.Namespace) -> None:
    options = _resolve_options(args)
    input_path = Path(args.input)
    title = args.title or input_path.name
    out_path = write_preview(input_path, Path(args.out), options, title=title, force=args.force)
    print(f"Wrote preview to {out_path}")


def _add_option_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="YAML file with converter options.")
    parser.add_argument(
        "--indent",
        type=int,
        help="Spaces per nesting level (overrides indent_size from --config).",
    )
    parser.add_argument(
        "--body-only",
        dest="body_only",
        action="store_true",
        help="Emit only the children of <body> when the document has one.",
    )
    parser.add_argument("--force", action="store_true", help="Overwrite the output file if it exists.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="falcogen",
        description="Convert HTML markup to Falco.Markup F# code.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert an HTML file to Falco.Markup.",
        description="Read HTML from a file or stdin and print the generated code.",
    )
    convert_parser.add_argument("--input", help="Input HTML file (default: stdin, or '-').")
    convert_parser.add_argument("--out", help="Write the code to this file instead of stdout.")
    _add_option_arguments(convert_parser)
    convert_parser.set_defaults(func=_handle_convert)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Write an HTML page showing the input next to the generated code.",
    )
    preview_parser.add_argument("--input", required=True, help="Input HTML file.")
    preview_parser.add_argument("--out", required=True, help="Output HTML file for the preview.")
    preview_parser.add_argument("--title", help="Page title (default: input file name).")
    _add_option_arguments(preview_parser)
    preview_parser.set_defaults(func=_handle_preview)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]

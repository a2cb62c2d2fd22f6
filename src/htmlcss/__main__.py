"""Command line entry point: ``python -m htmlcss [FILE]``."""

import argparse
import sys
from pathlib import Path

from .css_parser import CSSParser
from .css_tokenizer import CSSTokenizer
from .errors import NestingDepthError
from .parser import HTMLParser
from .serialize import to_css, to_html, to_test_format
from .tokenizer import HTMLTokenizer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="python -m htmlcss", description="Parse HTML or CSS and print the result")
    parser.add_argument("file", nargs="?", default="-", help="Input file, '-' for stdin (default)")
    language = parser.add_mutually_exclusive_group()
    language.add_argument("--css", action="store_true", help="Treat input as CSS")
    language.add_argument("--html", action="store_true", help="Treat input as HTML")
    parser.add_argument("--tokens", action="store_true", help="Print the token stream instead of the parse result")
    parser.add_argument(
        "--format",
        choices=("test", "html"),
        default="test",
        help="HTML output format: html5lib test tree (default) or re-serialized markup",
    )
    parser.add_argument("--max-depth", type=int, default=None, help="Override the nesting depth ceiling")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print parser debug output")
    return parser.parse_args(argv)


def _read_input(name):
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _is_css(args):
    if args.css:
        return True
    if args.html:
        return False
    return args.file.lower().endswith(".css")


def run(args):
    text = _read_input(args.file)
    options = {"debug": args.verbose}
    if args.max_depth is not None:
        options["max_depth"] = args.max_depth

    if _is_css(args):
        if args.tokens:
            return "\n".join(repr(token) for token in CSSTokenizer(text))
        return to_css(CSSParser(text, **options).parse())

    if args.tokens:
        return "\n".join(repr(token) for token in HTMLTokenizer(text))
    nodes = HTMLParser(text, **options).parse()
    if args.format == "html":
        return to_html(nodes)
    return to_test_format(nodes)


def main(argv=None):
    args = parse_args(argv)
    try:
        output = run(args)
    except NestingDepthError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point: a one-shot demo plus directory search/index."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Sequence, TextIO

from plaintext_editor.editor import Editor
from plaintext_editor.runtime.settings import FORMATS
from plaintext_editor.search import index_directory, search_directory
from plaintext_editor.serialization import save


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plaintext-editor",
        description="In-memory text editor with undo, and plain-text file search.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    demo = commands.add_parser("demo", help="Change, undo and index once")
    demo.add_argument("--name", default="example.txt")
    demo.add_argument("--text", default="Hello, world!")
    demo.add_argument("--change", default="Hello, Universe!")
    demo.add_argument("--directory", default=".")
    demo.add_argument(
        "--keyword",
        dest="keywords",
        action="append",
        default=None,
        help="Keyword to index (repeatable)",
    )
    demo.add_argument("--save", metavar="PATH", help="Persist the final document")
    demo.add_argument("--format", choices=FORMATS, default=None)

    for name, help_text in (
        ("search", "List files containing every keyword"),
        ("index", "Group files by the keywords they contain"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("directory")
        sub.add_argument("keywords", nargs="*")
        sub.add_argument("--pattern", default=None, help="Glob, e.g. '*.txt'")
        sub.add_argument(
            "--no-recursive", dest="recursive", action="store_false", default=None
        )
        sub.add_argument("--workers", type=int, default=None)

    tui = commands.add_parser("tui", help="Open the Textual editor")
    tui.add_argument("--name", default="untitled.txt")
    tui.add_argument("--text", default="")
    tui.add_argument("--directory", default=None)
    return parser


def _print_index(result: Dict[str, List[str]], out: TextIO) -> None:
    for keyword, paths in result.items():
        print(f"Keyword: {keyword}", file=out)
        for path in paths:
            print(f"File: {path}", file=out)


def run_demo(args: argparse.Namespace, out: TextIO) -> int:
    editor = Editor.from_text(args.text, name=args.name)
    print("Initial content:", file=out)
    print(editor.render(), file=out)

    editor.change(args.change)
    print("Changed content:", file=out)
    print(editor.render(), file=out)

    editor.undo()
    print("Undo change:", file=out)
    print(editor.render(), file=out)

    keywords = args.keywords or ["keyword1", "keyword2"]
    print("Indexed files:", file=out)
    _print_index(index_directory(args.directory, *keywords), out)

    if args.save:
        target = save(editor.document, args.save, fmt=args.format)
        print(f"Saved: {target}", file=out)
    return 0


def run_search(args: argparse.Namespace, out: TextIO) -> int:
    found = search_directory(
        args.directory,
        *args.keywords,
        pattern=args.pattern,
        recursive=args.recursive,
        workers=args.workers,
    )
    for path in found:
        print(path, file=out)
    return 0


def run_index(args: argparse.Namespace, out: TextIO) -> int:
    result = index_directory(
        args.directory,
        *args.keywords,
        pattern=args.pattern,
        recursive=args.recursive,
        workers=args.workers,
    )
    _print_index(result, out)
    return 0


def run_tui(args: argparse.Namespace, out: TextIO) -> int:
    del out
    from plaintext_editor.adapters.textual.app import run

    run(name=args.name, text=args.text, directory=args.directory)
    return 0


_COMMANDS = {
    "demo": run_demo,
    "search": run_search,
    "index": run_index,
    "tui": run_tui,
}


def main(argv: Optional[Sequence[str]] = None, *, out: Optional[TextIO] = None) -> int:
    args = _build_parser().parse_args(argv)
    return _COMMANDS[args.command](args, out or sys.stdout)


__all__ = ["main", "run_demo", "run_index", "run_search"]

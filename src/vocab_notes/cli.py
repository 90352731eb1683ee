"""
Command-line interface for linking and updating vocabulary notes.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import decode_delimiter, load_config
from .exceptions import VocabNotesError
from .linker import NoteLinker
from .lookup import load_lookup_or_empty
from .models import NoteContext, SubjectType
from .render import HtmlFormatter, TextFormatter

# 1 is a negative answer (update available, nothing to copy), 2 an error
EXIT_ERROR = 2


def main(argv: Optional[list] = None) -> int:
    """Main entry point for vocab-notes CLI.

    Returns 0 on success, 1 when `check` finds an update or `copy` has no
    line, and 2 on errors.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_ERROR

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        linker = _build_linker(args)
        return args.func(args, linker)
    except (VocabNotesError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vocab-notes",
        description="Link and update vocabulary study notes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        help="YAML file with note conventions and labels",
    )
    common.add_argument(
        "--slug",
        help="Slug of the subject the note belongs to",
    )
    common.add_argument(
        "--type",
        choices=[t.value for t in SubjectType],
        default=SubjectType.VOCABULARY.value,
        help="Subject type of the page (default: vocabulary)",
    )
    common.add_argument(
        "--delimiter",
        help="Line delimiter of the note, e.g. '\\n' or '<br>' (overrides config)",
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # links command
    links_parser = subparsers.add_parser(
        "links",
        parents=[common],
        help="Print the link section for a note",
    )
    links_parser.add_argument("note", help="Note file, or '-' for stdin")
    links_parser.add_argument(
        "--format",
        choices=["html", "text"],
        default="html",
        help="Output format (default: html)",
    )
    links_parser.set_defaults(func=cmd_links)

    # check command
    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Exit with status 1 when the dataset has newer information, 2 on errors",
    )
    check_parser.add_argument("note", help="Note file, or '-' for stdin")
    check_parser.add_argument(
        "--lookup",
        type=Path,
        required=True,
        help="YAML or JSON dataset snapshot",
    )
    check_parser.set_defaults(func=cmd_check)

    # update command
    update_parser = subparsers.add_parser(
        "update",
        parents=[common],
        help="Regenerate a note from the dataset",
    )
    update_parser.add_argument("note", help="Note file, or '-' for stdin")
    update_parser.add_argument(
        "--lookup",
        type=Path,
        required=True,
        help="YAML or JSON dataset snapshot",
    )
    update_parser.add_argument(
        "--write",
        action="store_true",
        help="Rewrite the note file in place instead of printing",
    )
    update_parser.set_defaults(func=cmd_update)

    # copy command
    copy_parser = subparsers.add_parser(
        "copy",
        parents=[common],
        help="Print the note line for the current subject",
    )
    copy_parser.add_argument(
        "--lookup",
        type=Path,
        required=True,
        help="YAML or JSON dataset snapshot",
    )
    copy_parser.set_defaults(func=cmd_copy)

    return parser


def _build_linker(args: argparse.Namespace) -> NoteLinker:
    config = load_config(args.config)
    delimiter = decode_delimiter(args.delimiter)
    if delimiter is not None:
        if not delimiter:
            raise VocabNotesError("Delimiter cannot be empty")
        config = config.with_delimiter(delimiter)
    context = NoteContext(current_slug=args.slug, subject_type=SubjectType(args.type))
    return NoteLinker(config, context)


def _read_note(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def cmd_links(args: argparse.Namespace, linker: NoteLinker) -> int:
    """Handle links command."""
    note = _read_note(args.note)
    formatter = TextFormatter() if args.format == "text" else HtmlFormatter()
    section = linker.link_section(note, formatter)
    if section:
        print(section)
    return 0


def cmd_check(args: argparse.Namespace, linker: NoteLinker) -> int:
    """Handle check command."""
    note = _read_note(args.note)
    lookup = load_lookup_or_empty(args.lookup)

    if linker.needs_update(note, lookup):
        print("Update available")
        return 1
    print("Note is up to date")
    return 0


def cmd_update(args: argparse.Namespace, linker: NoteLinker) -> int:
    """Handle update command."""
    note = _read_note(args.note)
    lookup = load_lookup_or_empty(args.lookup)
    updated = linker.regenerate(note, lookup)

    if not args.write:
        sys.stdout.write(updated)
        return 0

    if args.note == "-":
        print("[ERROR] --write needs a note file, not stdin", file=sys.stderr)
        return EXIT_ERROR

    if updated == note:
        print("Note is up to date")
        return 0

    Path(args.note).write_text(updated, encoding="utf-8")
    print(f"Updated {args.note}")
    return 0


def cmd_copy(args: argparse.Namespace, linker: NoteLinker) -> int:
    """Handle copy command."""
    lookup = load_lookup_or_empty(args.lookup)
    line = linker.subject_line(lookup)
    if line is None:
        print("No copyable line for this subject", file=sys.stderr)
        return 1
    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

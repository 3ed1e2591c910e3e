from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from bible_ref.config import load_config
from bible_ref.core.errors import InvalidBook
from bible_ref.core.parser import parse_reference
from bible_ref.data.books import BIBLE_VERSIONS, lookup_book, translation_codes
from bible_ref.engine.fetcher import VerseFetcher
from bible_ref.results.store import save_batch, save_selection


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_fetcher(args: argparse.Namespace) -> VerseFetcher:
    cfg = load_config(args.config)
    if args.translation:
        cfg["translation"] = args.translation
    return VerseFetcher.from_config(cfg)


def cmd_parse(args: argparse.Namespace) -> int:
    parsed = parse_reference(args.reference)
    print(json.dumps(parsed.to_dict(), ensure_ascii=False, indent=2))
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    try:
        book_id = lookup_book(args.book)
    except InvalidBook as e:
        print(str(e), file=sys.stderr)
        return 2
    print(book_id)
    return 0


def cmd_versions(args: argparse.Namespace) -> int:
    for v in BIBLE_VERSIONS:
        print(f"{v.id}\t{v.name}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    fetcher = _build_fetcher(args)
    result = fetcher.parse_and_fetch(args.reference)
    if not result.ok:
        print(f"Error ({result.kind.value}): {result.error}", file=sys.stderr)
        return 1

    for verse in result.verses:
        print(f"{verse.verse_id}. {verse.text}")
    if args.out:
        out = save_selection(Path(args.out), result.verses)
        print(f"Wrote {out}")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    fetcher = _build_fetcher(args)
    lines = Path(args.input).read_text(encoding="utf-8").splitlines()
    references = [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]

    entries = []
    failures = 0
    for reference in tqdm(references, desc="references", unit="ref", disable=args.quiet):
        parsed = parse_reference(reference)
        result = fetcher.fetch_verses(parsed.book, parsed.chapter, parsed.verse_range)
        entry = {
            "reference": reference,
            "parsed": parsed.to_dict(),
            "ok": result.ok,
            "verses": [v.to_dict() for v in result.verses],
        }
        if not result.ok:
            failures += 1
            entry["error"] = {"kind": result.kind.value, "message": str(result.error)}
        entries.append(entry)

    if args.out:
        out = save_batch(Path(args.out), entries)
        print(f"Wrote {out}")
    else:
        print(json.dumps(entries, ensure_ascii=False, indent=2))
    print(f"{len(entries) - failures}/{len(entries)} references resolved", file=sys.stderr)
    return 1 if failures else 0


def _add_fetch_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to config.yaml.")
    p.add_argument(
        "--translation",
        choices=translation_codes(),
        default=None,
        help="Translation code (default from config, else NIV).",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bible-ref", description="Parse Bible references and fetch their verses.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_parse = sub.add_parser("parse", help="Split a reference into book, chapter and verse range.")
    s_parse.add_argument("reference", help='Reference text, e.g. "John 3:16".')
    s_parse.set_defaults(func=cmd_parse)

    s_lookup = sub.add_parser("lookup", help="Print the numeric id of a book.")
    s_lookup.add_argument("book", help='Canonical book name, e.g. "1 Corinthians".')
    s_lookup.set_defaults(func=cmd_lookup)

    s_versions = sub.add_parser("versions", help="List the recognized translations.")
    s_versions.set_defaults(func=cmd_versions)

    s_fetch = sub.add_parser("fetch", help="Fetch the verses for a reference.")
    s_fetch.add_argument("reference", help='Reference text, e.g. "Romans 8:28-30".')
    s_fetch.add_argument("--out", default=None, help="Save the verses as JSON to this path.")
    _add_fetch_options(s_fetch)
    s_fetch.set_defaults(func=cmd_fetch)

    s_batch = sub.add_parser("batch", help="Fetch verses for every reference in a file (one per line).")
    s_batch.add_argument("--input", required=True, help="Text file of references; '#' starts a comment line.")
    s_batch.add_argument("--out", default=None, help="Write results JSON here instead of stdout.")
    s_batch.add_argument("--quiet", action="store_true", help="Hide the progress bar.")
    _add_fetch_options(s_batch)
    s_batch.set_defaults(func=cmd_batch)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

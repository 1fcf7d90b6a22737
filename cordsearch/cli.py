"""Command-line front end: index a directory, search, suggest, add and show."""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from cordsearch.barrels import HashTable
from cordsearch.inverted_index import (
    BARREL_COUNT,
    INVERTED_INDEX_FILE,
    build_inverted_index,
    load_barrels,
)
from cordsearch.lexicon import Indexer, parse_document
from cordsearch.search import multi_search

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class SearchHit:
    """One document found by a search."""

    doc_id: int
    path: str
    title: str
    rank: float


class SearchApp:
    """Keeps the index of ``input_dir`` up to date and answers queries."""

    def __init__(self, input_dir: PathLike, workdir: PathLike = ".") -> None:
        self.input_dir = Path(input_dir)
        if not self.input_dir.is_dir():
            raise FileNotFoundError(f"input directory does not exist: {input_dir}")
        self.indexer = Indexer(workdir)
        self.inverted_path = self.indexer.workdir / INVERTED_INDEX_FILE

        processed = self.indexer.build(self.input_dir)
        if processed > 0:
            logger.info(
                "Files processed: %d, lexicon size: %d, next available ID: %d",
                processed,
                len(self.indexer.lexicon),
                self.indexer.current_word_id + 1,
            )
            build_inverted_index(self.indexer.forward_index_path, self.inverted_path)

        if self.inverted_path.exists():
            self.barrels = load_barrels(self.inverted_path)
        else:
            self.barrels = HashTable(BARREL_COUNT)

    def suggest(self, text: str) -> list[str]:
        """Return lexicon words completing ``text``."""
        if not text:
            return []
        try:
            return self.indexer.lexicon.suggestions(text)
        except ValueError:
            return []

    def search(self, query: str) -> list[SearchHit]:
        """Return the documents matching ``query``, best first."""
        paths = self.indexer.paths
        titles = self.indexer.titles
        return [
            SearchHit(doc_id, paths[doc_id - 1], titles[doc_id - 1], score)
            for doc_id, score in multi_search(query, self.indexer.lexicon, self.barrels)
            if 1 <= doc_id <= len(paths)
        ]

    def add_file(self, path: PathLike) -> Path:
        """Copy a file into the input directory and return where it went."""
        source = Path(path)
        if not source.exists():
            raise FileNotFoundError(f"path does not exist: {path}")
        destination = self.input_dir / source.name
        if destination.exists():
            destination = self.input_dir / f"copy_{source.name}"
        shutil.copyfile(source, destination)
        return destination

    def show(self, path: PathLike) -> str:
        """Return the readable content of a document."""
        return parse_document(path)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cordsearch", description="Index and search a directory of documents."
    )
    parser.add_argument("input_dir", help="directory holding the documents")
    parser.add_argument("--workdir", default=".", help="directory for the index files")
    commands = parser.add_subparsers(dest="command", required=True)
    search = commands.add_parser("search", help="search the documents")
    search.add_argument("query", nargs="+")
    suggest = commands.add_parser("suggest", help="complete a word from the lexicon")
    suggest.add_argument("prefix")
    add = commands.add_parser("add", help="copy a file into the input directory")
    add.add_argument("path")
    show = commands.add_parser("show", help="print a document's content")
    show.add_argument("path")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    try:
        app = SearchApp(args.input_dir, args.workdir)
        if args.command == "search":
            for hit in app.search(" ".join(args.query)):
                print(f"{hit.path}\t{hit.title}")
        elif args.command == "suggest":
            for word in app.suggest(args.prefix):
                print(word)
        elif args.command == "add":
            destination = app.add_file(args.path)
            print(f"File successfully uploaded: {destination}")
        else:
            print(app.show(args.path), end="")
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
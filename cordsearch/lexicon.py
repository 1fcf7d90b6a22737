"""Document parsing, lexicon building and forward index writing."""

from __future__ import annotations

import json
import logging
import os
import string
from collections import defaultdict
from pathlib import Path
from typing import IO, Union

from cordsearch.trie import Trie

logger = logging.getLogger(__name__)

LEXICON_FILE = "lexicon.txt"
FORWARD_INDEX_FILE = "forward_index.txt"
PARSED_FILE = "parsed_files.txt"

_KEPT_CHARS = frozenset(string.ascii_letters + string.digits + "-")
_LOWER = frozenset(string.ascii_lowercase)

PathLike = Union[str, "os.PathLike[str]"]


def clean_token(token: str) -> str:
    """Normalise a raw token; return "" if it should not be indexed."""
    token = "".join(c for c in token if c in _KEPT_CHARS)
    if len(token) < 3:
        return ""
    token = token.lower()
    if sum(c in _LOWER for c in token) < 2:
        return ""
    return token


def parse_txt(path: PathLike) -> str:
    """Return the text of a plain file, every line ending in a newline."""
    with open(path, encoding="utf-8", errors="replace") as f:
        text = f.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(line + "\n" for line in lines)


def _paragraphs(section: object) -> list[str]:
    return [
        para["text"]
        for para in section
        if isinstance(para, dict) and isinstance(para.get("text"), str)
    ]


def parse_json(path: PathLike) -> str:
    """Return title, abstract and body text of a CORD-19 style JSON file."""
    with open(path, "rb") as f:
        try:
            doc = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"parse error in file {path}") from exc
    if not isinstance(doc, dict):
        return ""

    text = ""
    metadata = doc.get("metadata")
    if isinstance(metadata, dict) and isinstance(metadata.get("title"), str):
        text = metadata["title"]

    abstract = doc.get("abstract")
    if isinstance(abstract, list):
        if text:
            text += "\n\n"
        text += "Abstract: " + "".join(_paragraphs(abstract))

    body = doc.get("body_text")
    if isinstance(body, list):
        if text:
            text += "\n\n"
        text += "Main Text: " + "".join(p + "\n\n" for p in _paragraphs(body))

    return text


def parse_document(path: PathLike) -> str:
    """Read a document, choosing the parser by its extension."""
    if os.fspath(path).endswith(".json"):
        return parse_json(path)
    return parse_txt(path)


class Indexer:
    """Builds the lexicon and forward index for a directory of documents.

    Index files live in ``workdir`` and are appended to, so repeated builds
    only process documents that have not been indexed yet.
    """

    def __init__(self, workdir: PathLike = ".") -> None:
        self.workdir = Path(workdir)
        self.lexicon_path = self.workdir / LEXICON_FILE
        self.forward_index_path = self.workdir / FORWARD_INDEX_FILE
        self.parsed_path = self.workdir / PARSED_FILE
        self.lexicon = Trie()
        self.current_word_id = 0
        self.titles: list[str] = []
        self.paths: list[str] = []

    def load_lexicon(self) -> None:
        """Load the saved lexicon, if any, into the trie."""
        self.lexicon = Trie()
        if self.lexicon_path.exists():
            tokens = self.lexicon_path.read_text(encoding="utf-8").split()
            for id_text, word in zip(tokens[::2], tokens[1::2]):
                try:
                    word_id = int(id_text)
                except ValueError:
                    break
                self.current_word_id = word_id
                self.lexicon.insert(word, word_id)
        logger.info(
            "Loaded %d existing lexicon entries. current_wordID=%d",
            len(self.lexicon),
            self.current_word_id,
        )

    def list_files(self, input_dir: PathLike) -> tuple[int, list[str]]:
        """Restore parsed documents and find new ones in ``input_dir``.

        Returns the last document id already used and the paths of regular
        files that have not been parsed yet.
        """
        self.titles = []
        self.paths = []
        last_doc_id = 0
        if self.parsed_path.exists():
            with open(self.parsed_path, encoding="utf-8") as f:
                for line in f:
                    line = line.rstrip("\n")
                    if not line.strip():
                        continue
                    parts = line.split(" ", 2)
                    if len(parts) < 2:
                        raise ValueError(f"malformed line in {self.parsed_path}: {line!r}")
                    last_doc_id = int(parts[0])
                    self.paths.append(parts[1])
                    self.titles.append(parts[2] if len(parts) > 2 else "")

        parsed = set(self.paths)
        directory = os.fspath(input_dir)
        new_files = []
        for name in sorted(os.listdir(directory)):
            path = os.path.join(directory, name)
            if os.path.isfile(path) and path not in parsed:
                new_files.append(path)
        return last_doc_id, new_files

    def enter_in_lexicon(self, word: str, lexfile: IO[str]) -> int:
        """Return the id of ``word``, adding it to the lexicon if new."""
        word_id = self.lexicon.search(word)
        if word_id is None:
            self.current_word_id += 1
            word_id = self.current_word_id
            self.lexicon.insert(word, word_id)
            lexfile.write(f"{word_id} {word}\n")
        return word_id

    def parse_content(self, content: str, lexfile: IO[str]) -> dict[int, tuple[int, int]]:
        """Map each word id in ``content`` to (sum of positions, frequency)."""
        ranks: defaultdict[int, list[int]] = defaultdict(lambda: [0, 0])
        pos = 0
        for raw in content.split():
            word = clean_token(raw)
            if not word:
                continue
            pos += 1
            entry = ranks[self.enter_in_lexicon(word, lexfile)]
            entry[0] += pos
            entry[1] += 1
        return {word_id: (total, count) for word_id, (total, count) in ranks.items()}

    def save_to_fwd_index(
        self, doc_id: int, indexfile: IO[str], ranks: dict[int, tuple[int, int]]
    ) -> None:
        """Write one forward index line per word of the document."""
        for word_id, (position_sum, frequency) in ranks.items():
            indexfile.write(f"{doc_id} {word_id} {position_sum} {frequency}\n")

    def build(self, input_dir: PathLike) -> int:
        """Index every new document in ``input_dir``; return how many."""
        self.load_lexicon()
        doc_id, files = self.list_files(input_dir)
        logger.info("Found %d new files in directory: %s", len(files), input_dir)
        if not files:
            return 0

        processed = 0
        with open(self.lexicon_path, "a", encoding="utf-8") as lexfile, open(
            self.forward_index_path, "a", encoding="utf-8"
        ) as indexfile, open(self.parsed_path, "a", encoding="utf-8") as parsedfile:
            for path in files:
                doc_id += 1
                try:
                    content = parse_document(path)
                except (OSError, ValueError) as exc:
                    logger.warning("Skipping %s: %s", path, exc)
                    continue
                if not content:
                    continue

                title = content.split("\n", 1)[0]
                self.titles.append(title)
                self.paths.append(path)

                ranks = self.parse_content(content, lexfile)
                self.save_to_fwd_index(doc_id, indexfile, ranks)
                parsedfile.write(f"{doc_id} {path} {title}\n")
                processed += 1

                if processed % 1000 == 0:
                    logger.info(
                        "Processed %d files | Current lexicon size: %d",
                        processed,
                        len(self.lexicon),
                    )
        return processed
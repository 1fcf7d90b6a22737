# cordsearch

cordsearch is a small full-text search engine for a directory of documents.
It reads plain-text files and CORD-19 style JSON papers. A file whose name ends
in `.json` is read as a paper, and its title, abstract and body text are used.
Any other file is read as plain text. The first line of a document's content is
its title.

## How it works

- **Lexicon**: each cleaned word gets a numeric ID. The words are kept in a trie
  (`cordsearch.trie.Trie`). The trie also gives autocompletion suggestions.
- **Forward index**: for every word in a document, the index records the sum
  of the word's positions and how often the word occurs.
- **Inverted index and barrels**: the forward index is flipped into an inverted
  index. That index is loaded into a hash table of posting lists
  (`cordsearch.barrels.HashTable`).
- **Ranking**: a lower score is better. A document's score for a word is the
  word's position sum divided by the square of its frequency. A one-word query
  lists the documents by that score. For a query of several words, documents
  that hold more of the query words come first. Documents that hold the same
  number of query words are ordered by their summed scores. Query words that
  are not in the lexicon are ignored.

All index files are kept in one working directory:

| File                  | Contents                                     |
|-----------------------|----------------------------------------------|
| `lexicon.txt`         | `wordID word`                                |
| `forward_index.txt`   | `docID wordID position_sum frequency`        |
| `parsed_files.txt`    | `docID path title`                           |
| `inverted_index.txt`  | `wordID docID position_sum frequency`        |

Indexing is incremental. Files already listed in `parsed_files.txt` are
skipped. New words are added to the end of `lexicon.txt`, and new postings to
the end of `forward_index.txt`. When new files have been indexed,
`inverted_index.txt` is written again from the whole forward index.

## Tokens

A token is cleaned before it is indexed:

1. Every character other than an ASCII letter, an ASCII digit or `-` is removed.
2. The token is dropped if it is now shorter than 3 characters.
3. The token is lowercased.
4. The token is dropped if it has fewer than 2 letters.

## Installation

```
pip install .
```

## Command line

```
cordsearch INPUT_DIR [--workdir DIR] COMMAND ...
```

Each run first indexes any new files in `INPUT_DIR`. The index files are kept
in `--workdir`, which is the current directory by default and must already
exist. The run then carries out one of these commands:

- `search QUERY...`: prints the path and title of each matching document,
  best first, separated by a tab.
- `suggest PREFIX`: prints a few lexicon words that begin with `PREFIX`.
- `add PATH`: copies a file into `INPUT_DIR`. If a file of that name is already
  there, the copy is named `copy_<name>`. The new file is indexed on the next
  run.
- `show PATH`: prints the readable content of a document.

`--workdir` must come before the command. On a file or parse error the command
prints `error: ...` to standard error and exits with status 1.

## Library use

```python
from cordsearch.cli import SearchApp

app = SearchApp("papers/", "index/")   # both directories must exist
print(app.suggest("vir"))
for hit in app.search("viral transmission"):
    print(hit.doc_id, hit.path, hit.title, hit.rank)
print(app.show("papers/some_paper.json"))
```

`SearchApp` raises `FileNotFoundError` if the input directory does not exist.
`SearchApp.add_file` also raises `FileNotFoundError` if the file to add does
not exist.

You can also use the lower-level parts on their own:

```python
from cordsearch.lexicon import Indexer, clean_token, parse_document
from cordsearch.inverted_index import build_inverted_index, load_barrels
from cordsearch.search import multi_search

indexer = Indexer("index/")
indexer.build("papers/")
build_inverted_index(indexer.forward_index_path, "index/inverted_index.txt")
barrels = load_barrels("index/inverted_index.txt")
print(multi_search("viral transmission", indexer.lexicon, barrels))
```

`multi_search` returns `(document id, score)` pairs. Document ids start at 1
and follow the order of `Indexer.paths` and `Indexer.titles`.

## What it does not do

cordsearch is a command-line tool and a library. It has no graphical window.
It has no interactive search box and no clickable result list. Documents are
never removed from the index: a deleted or changed file keeps its old entries.

## Tests

```
pip install .[test]
pytest
```
"""Spelling dictionary backed by a trie, with edit-distance search.

Words are stored lower case and letters only: any character that is not
an ASCII letter is dropped on insertion. A query lists every stored word
within a given Levenshtein distance, in alphabetical order.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import islice
from string import ascii_letters
from typing import Iterator, Optional

MAX_WORD_LENGTH = 100
MAX_RESULTS = 20
QUERIES_FILE = "consultas.txt"


def edit_distance(first: str, second: str) -> int:
    """Levenshtein distance between two words, ignoring case."""
    first = first.lower()
    second = second.lower()
    previous = list(range(len(second) + 1))
    for row, left in enumerate(first, 1):
        current = [row]
        for column, right in enumerate(second, 1):
            if left == right:
                current.append(previous[column - 1])
            else:
                current.append(1 + min(previous[column], current[column - 1], previous[column - 1]))
        previous = current
    return previous[-1]


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of lower-case words kept in a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word, keeping only its ASCII letters, lower-cased."""
        node = self._root
        for char in word:
            if char in ascii_letters:
                node = node.children.setdefault(char.lower(), _Node())
        node.is_word = True

    def words(self) -> Iterator[str]:
        """Every stored word, in alphabetical order."""
        yield from self._walk(self._root, "")

    def _walk(self, node: _Node, prefix: str) -> Iterator[str]:
        if node.is_word:
            yield prefix
        for letter in sorted(node.children):
            yield from self._walk(node.children[letter], prefix + letter)

    def search(self, query: str, max_edits: int) -> list[str]:
        """Stored words within ``max_edits`` edits of ``query``.

        At most ``MAX_RESULTS`` words are returned, in alphabetical order.
        """
        matches = (word for word in self.words() if edit_distance(word, query) <= max_edits)
        return list(islice(matches, MAX_RESULTS))


def load_dictionary(trie: Trie, path: str) -> None:
    """Insert every word of a text file into ``trie``.

    A word of ``MAX_WORD_LENGTH`` characters or more is dropped together
    with the rest of its line.
    """
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            for word in line.split():
                if len(word) >= MAX_WORD_LENGTH:
                    break
                trie.insert(word)


def process_queries(trie: Trie, path: str) -> list[str]:
    """Answer the queries in a file of ``word max_edits`` pairs.

    Each answer is a line ``word:match1,match2``. Raises ValueError when a
    query has no edit limit or the limit is not an integer.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = iter(handle.read().split())
    answers = []
    for query in tokens:
        limit = next(tokens, None)
        if limit is None:
            raise ValueError(f"query {query!r} has no edit limit")
        matches = trie.search(query, int(limit))
        answers.append(f"{query}:" + ",".join(matches))
    return answers


def main(argv: Optional[list[str]] = None) -> int:
    """Load a dictionary, print its words and answer the queries file."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Use: dicionario <nome do arquivo dicionario>", file=sys.stderr)
        return 1
    trie = Trie()
    try:
        load_dictionary(trie, argv[0])
    except OSError as error:
        print(f"Falha ao abrir arquivo dicionário: {error}", file=sys.stderr)
        return 1
    for word in trie.words():
        print(word)
    try:
        answers = process_queries(trie, QUERIES_FILE)
    except OSError as error:
        print(
            f"Falha ao abrir arquivo de consultas, lembre-se de ter um arquivo {QUERIES_FILE}: {error}",
            file=sys.stderr,
        )
        return 1
    for answer in answers:
        print(answer)
    return 0
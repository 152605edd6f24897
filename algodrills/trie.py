"""Prefix tree and the word problems built on it."""

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    word: "str | None" = None


class Trie:
    """Prefix tree of words."""

    def __init__(self, words=()):
        self._root = _TrieNode()
        for word in words:
            self.add(word)

    def add(self, word):
        """Insert ``word``."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.word = word

    def _find(self, text):
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def contains(self, word):
        """Return True if ``word`` was added."""
        node = self._find(word)
        return node is not None and node.word is not None

    def has_prefix(self, prefix):
        """Return True if some added word starts with ``prefix``."""
        return self._find(prefix) is not None

    def __contains__(self, word):
        return self.contains(word)


def word_break(s, word_dict):
    """Return True if ``s`` splits into a sequence of dictionary words."""
    trie = Trie(word_dict)
    breakable = [False] * len(s) + [True]
    for start in reversed(range(len(s))):
        node = trie._root
        for end in range(start, len(s)):
            node = node.children.get(s[end])
            if node is None:
                break
            if node.word is not None and breakable[end + 1]:
                breakable[start] = True
                break
    return breakable[0]


def find_words(board, words):
    """Return the words that can be traced on the letter grid by moving
    between horizontally or vertically adjacent cells, each cell used at
    most once per word; each word is reported once, in order of discovery."""
    trie = Trie(words)
    found = []
    rows = len(board)
    cols = len(board[0]) if rows else 0
    visited = set()

    def search(row, col, node):
        child = node.children.get(board[row][col])
        if child is None:
            return
        if child.word is not None:
            found.append(child.word)
            child.word = None
        visited.add((row, col))
        for next_row, next_col in (
            (row - 1, col),
            (row + 1, col),
            (row, col - 1),
            (row, col + 1),
        ):
            if 0 <= next_row < rows and 0 <= next_col < cols:
                if (next_row, next_col) not in visited:
                    search(next_row, next_col, child)
        visited.discard((row, col))

    for row in range(rows):
        for col in range(cols):
            search(row, col, trie._root)
    return found
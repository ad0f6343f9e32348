# bert_tokenizer/trie.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import weakref
from typing import Dict, Optional, Tuple

class TrieNode:
    """
    A single code point position in the vocabulary Trie.

    Children are owned by their parent. The parent link is a weak reference
    and is only followed to rebuild the matched string.

    Args:
        key (Optional[str]): The code point this node represents. None for the root.
        parent (Optional[TrieNode]): The node this one hangs off. None for the root.
    """
    __slots__ = ("key", "_parent", "children", "end", "score", "index", "__weakref__")

    def __init__(self, key: Optional[str] = None, parent: Optional["TrieNode"] = None):
        self.key = key
        self._parent = weakref.ref(parent) if parent is not None else None
        self.children: Dict[str, "TrieNode"] = {}
        self.end = False
        self.score: Optional[float] = None
        self.index: Optional[int] = None

    @property
    def parent(self) -> Optional["TrieNode"]:
        return self._parent() if self._parent is not None else None

    def get_word(self) -> Tuple[str, Optional[float], Optional[int]]:
        """
        Rebuilds the string that ends at this node.

        Returns:
            Tuple[str, Optional[float], Optional[int]]: The word, its score and
                its vocabulary index.
        """
        symbols = []
        node = self
        while node is not None:
            if node.key is not None:
                symbols.append(node.key)
            node = node.parent
        return "".join(reversed(symbols)), self.score, self.index

    def __repr__(self) -> str:
        return f"TrieNode(key={self.key!r}, end={self.end}, index={self.index})"


class Trie:
    """Prefix tree over vocabulary strings, keyed by Unicode code points."""
    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str, score: float, index: int) -> None:
        """
        Inserts a vocabulary word into the trie.

        Re-inserting an existing word overwrites its score and index.

        Args:
            word (str): The vocabulary string.
            score (float): Score stored on the terminal node.
            index (int): Position of the word in the vocabulary file.
        """
        node = self.root
        # Iterating a str yields code points, so astral characters stay whole.
        for i, symbol in enumerate(word):
            child = node.children.get(symbol)
            if child is None:
                child = TrieNode(symbol, node)
                node.children[symbol] = child
            node = child

            if i == len(word) - 1:
                if not node.end:
                    self._size += 1
                node.end = True
                node.score = score
                node.index = index

    def find(self, token: str) -> Optional[TrieNode]:
        """
        Walks the trie along `token`.

        The node returned is not necessarily terminal, check `end` on it.

        Args:
            token (str): The string to look up.

        Returns:
            Optional[TrieNode]: The node reached after consuming all of `token`,
                or None as soon as a code point has no child.
        """
        node = self.root
        for symbol in token:
            node = node.children.get(symbol)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.end

    def __len__(self) -> int:
        return self._size

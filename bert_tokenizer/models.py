# bert_tokenizer/models.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

from typing import List, Optional

from .trie import Trie

UNK_INDEX = 100

class Model:
    """Base class for sub-word tokenization models (Optional Interface)."""
    def tokenize(self, text: str) -> List[int]:
        """
        Tokenizes a single pre-tokenized word/string into sub-word IDs.

        Args:
            text (str): A single word or string unit produced by the PreTokenizer.

        Returns:
            List[int]: A list of sub-word token IDs.
        """
        raise NotImplementedError

    def token_to_id(self, token: str) -> Optional[int]:
        """Converts a sub-word token string to its ID."""
        raise NotImplementedError

    def id_to_token(self, token_id: int) -> Optional[str]:
        """Converts a token ID back to its sub-word string."""
        raise NotImplementedError


class WordPieceModel(Model):
    """
    Greedy longest-match-first sub-word segmentation over a vocabulary Trie.

    A word is either covered entirely by known sub-words or replaced by a
    single unknown ID. Partial matches are never emitted.

    Args:
        vocab (List[str]): Vocabulary strings. A string's position is its ID.
        unk_token_id (int, optional): ID emitted for a word that cannot be
            segmented. Defaults to 100.
        score (float, optional): Placeholder score stored for every entry.
            Defaults to 1.
    """
    def __init__(self,
                 vocab: List[str],
                 unk_token_id: int = UNK_INDEX,
                 score: float = 1):
        self.vocab = vocab
        self.unk_token_id = unk_token_id
        self.trie = Trie()
        for index, word in enumerate(vocab):
            self.trie.insert(word, score, index)

    def token_to_id(self, token: str) -> Optional[int]:
        """Converts a sub-word token string to its ID."""
        node = self.trie.find(token)
        if node is None or not node.end:
            return None
        return node.index

    def id_to_token(self, token_id: int) -> Optional[str]:
        """Converts a token ID back to its sub-word string."""
        if 0 <= token_id < len(self.vocab):
            return self.vocab[token_id]
        return None

    def tokenize(self, word: str) -> List[int]:
        """
        Segments a single marker-prefixed word into vocabulary IDs.

        At each position the longest slice that ends on a terminal Trie node
        wins. If no slice starting at some position is known, the whole word
        maps to `unk_token_id`.

        Args:
            word (str): The word to segment.

        Returns:
            List[int]: Sub-word IDs, or [unk_token_id].
        """
        chars = list(word)
        sub_tokens = []
        start = 0
        while start < len(chars):
            end = len(chars)
            current_index = None
            while start < end:
                match = self.trie.find("".join(chars[start:end]))
                if match is not None and match.end:
                    current_index = match.get_word()[2]
                    break
                end -= 1

            if current_index is None:
                return [self.unk_token_id]

            sub_tokens.append(current_index)
            start = end

        return sub_tokens

# bert_tokenizer/pre_tokenizers.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
 Twitter: @Mmorgan_ML
"""

from dataclasses import dataclass
from typing import List, Optional

from .normalizers import Normalizer, Lowercase, clean_text

PUNCTUATIONS = frozenset("[~`!@#$%^&*(){}[];:\"'<,.>?/\\|-_+=")


def is_punctuation(ch: str) -> bool:
    return ch in PUNCTUATIONS


@dataclass
class Token:
    """A word or punctuation piece and its code point offset in the original text."""
    text: str
    index: int


def run_split_on_punc(word: str, base_offset: int, offsets: List[int]) -> List[Token]:
    """
    Splits a whitespace-free word on punctuation.

    Every punctuation character becomes its own token and the runs between
    them are kept whole.

    Args:
        word (str): A single word from the cleaned text.
        base_offset (int): Position of the word's first character in the cleaned text.
        offsets (List[int]): Offset map produced by `clean_text`.

    Returns:
        List[Token]: The pieces, each carrying the original offset of its first character.
    """
    tokens: List[Token] = []
    position = base_offset
    start_new_word = True
    for ch in word:
        if is_punctuation(ch):
            tokens.append(Token(ch, offsets[position]))
            start_new_word = True
        else:
            if start_new_word:
                tokens.append(Token("", offsets[position]))
                start_new_word = False
            tokens[-1].text += ch
        position += 1
    return tokens


def process_input(text: str, normalizer: Optional[Normalizer] = None) -> List[Token]:
    """
    Cleans `text` and breaks it into lowercase word and punctuation tokens.

    Args:
        text (str): The raw input string.
        normalizer (Optional[Normalizer]): Applied to every whole word before
            the punctuation split. Defaults to `Lowercase`.

    Returns:
        List[Token]: Tokens in input order.
    """
    normalizer = normalizer or Lowercase()
    cleaned, offsets = clean_text(text)

    tokens: List[Token] = []
    char_count = 0
    for word in cleaned.split(" "):
        # Case mappings are context sensitive (Greek final sigma), so the whole
        # word is lowercased. Offsets come from splitting the unchanged word;
        # lowercasing never adds or removes ASCII punctuation, so the two
        # splits line up piece for piece.
        lowered = normalizer.normalize_str(word)
        lowered_pieces = run_split_on_punc(lowered, 0, list(range(len(lowered))))
        for token, piece in zip(run_split_on_punc(word, char_count, offsets), lowered_pieces):
            tokens.append(Token(piece.text, token.index))
        char_count += len(word) + 1
    return tokens


class PreTokenizer:
    """Base class for PreTokenizers (Optional Interface)."""
    def pre_tokenize(self, text: str) -> List[Token]:
        """
        Splits the input string into preliminary tokens (words/units).

        Args:
            text (str): The raw input string.

        Returns:
            List[Token]: Tokens with their original offsets.
        """
        raise NotImplementedError

    def pre_tokenize_str(self, text: str) -> List[str]:
        return [token.text for token in self.pre_tokenize(text)]

class BertPreTokenizer(PreTokenizer):
    """
    Cleans the text, splits it on spaces, lowercases and isolates punctuation.

    Args:
        normalizer (Optional[Normalizer]): Per-word normalizer. Defaults to `Lowercase`.
    """
    def __init__(self, normalizer: Optional[Normalizer] = None):
        self.normalizer = normalizer or Lowercase()

    def pre_tokenize(self, text: str) -> List[Token]:
        return process_input(text, self.normalizer)

# bert_tokenizer/normalizers.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import unicodedata
from typing import List, Tuple

import regex as re

# Unicode White_Space plus U+FEFF (zero width no-break space).
_WHITESPACE_RE = re.compile(r"[\s\uFEFF]")

_INVALID_CODE_POINTS = (0x0, 0xFFFD)


def is_whitespace(ch: str) -> bool:
    return _WHITESPACE_RE.match(ch) is not None


def is_invalid(ch: str) -> bool:
    return ord(ch) in _INVALID_CODE_POINTS


def clean_text(text: str) -> Tuple[str, List[int]]:
    """
    Removes invalid characters and collapses whitespace runs.

    Every whitespace run becomes a single ASCII space, and whitespace before
    the first kept character is dropped. Alongside the cleaned string this
    returns, for every output character, its code point offset in `text`.

    Args:
        text (str): The raw input string.

    Returns:
        Tuple[str, List[int]]: The cleaned string and the offset map.
    """
    output = []
    offsets = []
    for original_index, ch in enumerate(text):
        if is_invalid(ch):
            continue
        if is_whitespace(ch):
            if not output or output[-1] == " ":
                continue
            ch = " "
        output.append(ch)
        offsets.append(original_index)
    return "".join(output), offsets


class Normalizer:
    """Base class for Normalizers (Optional Interface)."""
    def normalize_str(self, text: str) -> str:
        raise NotImplementedError

class Lowercase(Normalizer):
    """Converts the input string to lowercase."""
    def normalize_str(self, text: str) -> str:
        """
        Converts the input string to lowercase.

        Args:
            text (str): The input string.

        Returns:
            str: The lowercased string.
        """
        return text.lower()

class NFKC(Normalizer):
    """Applies Unicode NFKC normalization to the input string."""
    def normalize_str(self, text: str) -> str:
        """
        Applies Unicode NFKC normalization.

        Args:
            text (str): The input string.

        Returns:
            str: The NFKC normalized string.
        """
        return unicodedata.normalize('NFKC', text)

class Prepend(Normalizer):
    """
    Prepends a fixed marker to the input string.

    Args:
        prefix (str): The marker to put in front of every string.
    """
    def __init__(self, prefix: str):
        self.prefix = prefix

    def normalize_str(self, text: str) -> str:
        return self.prefix + text

class Sequence(Normalizer):
    """
    Applies a sequence of normalizers in the order they are given.

    Args:
        normalizers (List[Normalizer]): A list of normalizer objects to apply.
    """
    def __init__(self, normalizers: List[Normalizer]):
        if not isinstance(normalizers, list) or not all(isinstance(n, Normalizer) for n in normalizers):
             raise TypeError("Expected a list of Normalizer instances.")
        self.normalizers = normalizers

    def normalize_str(self, text: str) -> str:
        """
        Applies each normalizer in the sequence to the text.

        Args:
            text (str): The input string.

        Returns:
            str: The normalized string after applying all normalizers.
        """
        for normalizer in self.normalizers:
            text = normalizer.normalize_str(text)
        return text

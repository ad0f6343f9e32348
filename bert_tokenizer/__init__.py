# bert_tokenizer/__init__.py

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

"""
BERT WordPiece Tokenizer Package.

Converts free-form text into the integer IDs of a fixed BERT vocabulary:
text cleaning with offset tracking, punctuation splitting, greedy
longest-match-first sub-word segmentation over a Trie, and assembly of
fixed-length classifier inputs.
"""

from .config import TokenizerConfig
from .tokenizer import (
    BertTokenizer,
    SharedTokenizer,
    CLS_INDEX,
    CLS_TOKEN,
    SEP_INDEX,
    SEP_TOKEN,
    SEPARATOR,
)
from .models import WordPieceModel, UNK_INDEX
from .processors import ClassifierInputProcessor
from .pre_tokenizers import Token, process_input, run_split_on_punc
from .normalizers import clean_text
from .sources import (
    LoadError,
    VocabularySource,
    FileVocabularySource,
    UrlVocabularySource,
)
from .trie import Trie, TrieNode

# Define the public API of the package
__all__ = [
    "BertTokenizer",
    "SharedTokenizer",
    "TokenizerConfig",
    "WordPieceModel",
    "ClassifierInputProcessor",
    "Trie",
    "TrieNode",
    "Token",
    "clean_text",
    "process_input",
    "run_split_on_punc",
    "LoadError",
    "VocabularySource",
    "FileVocabularySource",
    "UrlVocabularySource",
    "UNK_INDEX",
    "CLS_INDEX",
    "CLS_TOKEN",
    "SEP_INDEX",
    "SEP_TOKEN",
    "SEPARATOR",
]

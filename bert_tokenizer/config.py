# bert_tokenizer/config.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.25
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

from dataclasses import dataclass
from typing import Optional

@dataclass
class TokenizerConfig:
    """
    Configuration class for the BERT tokenizer and its classifier inputs.
    """
    # Vocabulary location (exactly one of these)
    vocab_path: Optional[str] = None
    vocab_url: Optional[str] = None
    request_timeout: float = 30.0

    # Reserved IDs (assumed to match the vocabulary file)
    unk_token_id: int = 100
    cls_token_id: int = 101
    sep_token_id: int = 102
    pad_token_id: int = 0

    # Classifier input length
    max_length: int = 128

    def __post_init__(self):
        """Post-initialization checks."""
        if (self.vocab_path is None) == (self.vocab_url is None):
            raise ValueError("Exactly one of vocab_path or vocab_url must be set.")
        if self.max_length < 2:
            raise ValueError(f"max_length ({self.max_length}) must be at least 2 to hold [CLS] and [SEP].")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive.")

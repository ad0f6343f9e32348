# bert_tokenizer/processors.py

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

from typing import List, Dict, Optional

class PostProcessor:
    """Base class for PostProcessors (Optional Interface)."""
    def process(self,
                token_ids: List[int],
                max_length: Optional[int] = None,
                **kwargs) -> Dict[str, List[int]]:
        """
        Turns a sequence of token IDs into fixed-shape model inputs.

        Args:
            token_ids (List[int]): Token IDs produced by the tokenizer.
            max_length (Optional[int], optional): Overrides the processor's
                fixed sequence length. Defaults to None.

        Returns:
            Dict[str, List[int]]: A dictionary containing "input_ids",
                                  "attention_mask" and "token_type_ids".
        """
        raise NotImplementedError


class ClassifierInputProcessor(PostProcessor):
    """
    Builds fixed-length classifier inputs from a single sequence.

    The sequence is laid out following `template` ("[CLS] $A [SEP]" by
    default), cut to `max_length` and right padded with `pad_token_id`.
    Padding positions are masked out and every token type ID is 0.

    Args:
        special_tokens (Dict[str, int], optional): Special token strings used in
            the template mapped to their IDs.
            Defaults to {"[CLS]": 101, "[SEP]": 102}.
        template (str, optional): Layout of the sequence. $A is the placeholder
            for the tokenized text. Defaults to "[CLS] $A [SEP]".
        pad_token_id (int, optional): ID used for padding. Defaults to 0.
        max_length (int, optional): Length of every processed sequence. Defaults to 128.
    """
    def __init__(self,
                 special_tokens: Optional[Dict[str, int]] = None,
                 template: str = "[CLS] $A [SEP]",
                 pad_token_id: int = 0,
                 max_length: int = 128):
        self.special_tokens = special_tokens if special_tokens is not None else {"[CLS]": 101, "[SEP]": 102}
        self.template = template.split()
        self.pad_token_id = pad_token_id
        self.max_length = self._check_max_length(max_length)

        if self.template.count("$A") != 1:
            raise ValueError("Template must contain the $A placeholder exactly once.")
        for part in self.template:
            if part != "$A" and part not in self.special_tokens:
                raise ValueError(f"Unknown part '{part}' in template.")

    def _check_max_length(self, max_length: int) -> int:
        num_special = sum(1 for part in self.template if part != "$A")
        if max_length < num_special:
            raise ValueError(
                f"max_length ({max_length}) must leave room for the {num_special} special tokens."
            )
        return max_length

    def _build_sequence(self, ids: List[int]) -> List[int]:
        """Lays out input_ids according to the template."""
        input_ids = []
        for part in self.template:
            if part == "$A":
                input_ids.extend(ids)
            else:
                input_ids.append(self.special_tokens[part])
        return input_ids

    def process(self,
                token_ids: List[int],
                max_length: Optional[int] = None,
                **kwargs) -> Dict[str, List[int]]:
        """
        Processes encoded token IDs.

        Truncation happens after the special tokens are placed, so an over-long
        input loses its trailing [SEP] along with the overflow.

        Args:
             (See PostProcessor base class)

        Returns:
            Dict[str, List[int]]: Processed encodings.
        """
        max_length = self._check_max_length(max_length) if max_length is not None else self.max_length

        input_ids = self._build_sequence(token_ids)
        if len(input_ids) > max_length:
            input_ids = input_ids[:max_length]
        else:
            input_ids.extend([self.pad_token_id] * (max_length - len(input_ids)))

        attention_mask = [0 if id_ == self.pad_token_id else 1 for id_ in input_ids]
        token_type_ids = [0] * max_length

        return {
            "input_ids": input_ids,
            "attention_mask": attention_mask,
            "token_type_ids": token_type_ids,
        }

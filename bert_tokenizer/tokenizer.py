# bert_tokenizer/tokenizer.py

"""
 This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
 To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
 or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

 Original Author: Michael Morgan
 2025.04.12
 Github: https://github.com/Mmorgan-ML
 Email: mmorgankorea@gmail.com
"""

import asyncio
import logging
from typing import List, Optional, Dict, Union, Literal, Any
import torch # For return_tensors='pt'
import numpy as np # For return_tensors='np'

# Import components using relative paths
from .config import TokenizerConfig
from .normalizers import Normalizer, Sequence, Prepend, NFKC
from .pre_tokenizers import PreTokenizer, BertPreTokenizer
from .models import WordPieceModel, UNK_INDEX
from .processors import PostProcessor, ClassifierInputProcessor
from .sources import VocabularySource, source_from_config

logger = logging.getLogger(__name__)

SEPARATOR = "\u2581"
CLS_INDEX = 101
CLS_TOKEN = "[CLS]"
SEP_INDEX = 102
SEP_TOKEN = "[SEP]"
PAD_INDEX = 0

class BertTokenizer:
    """
    Orchestrates the tokenization pipeline.

    Pipeline:
    1. BertPreTokenizer cleans the text and splits it into lowercase word and
       punctuation tokens.
    2. Every token except the reserved markers is prefixed with U+2581 and
       NFKC normalized.
    3. WordPieceModel segments each token over the vocabulary Trie.

    The tokenizer is unusable until `load()` has completed. After that it is
    read-only and can be shared between threads and tasks.

    Args:
        source (Optional[VocabularySource]): Where `load()` gets the vocabulary from.
        unk_token_id (int, optional): ID for unknown words. Defaults to 100.
        cls_token_id (int, optional): ID of [CLS]. Defaults to 101.
        sep_token_id (int, optional): ID of [SEP]. Defaults to 102.
        pad_token_id (int, optional): ID used to pad classifier inputs. Defaults to 0.
        max_length (int, optional): Classifier input length used by `encode`. Defaults to 128.
        pre_tokenizer (Optional[PreTokenizer], optional): Pre-tokenizer instance.
        normalizer (Optional[Normalizer], optional): Applied to every non-reserved
            token before segmentation. Defaults to marker prefix followed by NFKC.
        post_processor (Optional[PostProcessor], optional): Post-processor instance.
    """
    def __init__(
        self,
        source: Optional[VocabularySource] = None,
        unk_token_id: int = UNK_INDEX,
        cls_token_id: int = CLS_INDEX,
        sep_token_id: int = SEP_INDEX,
        pad_token_id: int = PAD_INDEX,
        max_length: int = 128,
        pre_tokenizer: Optional[PreTokenizer] = None,
        normalizer: Optional[Normalizer] = None,
        post_processor: Optional[PostProcessor] = None,
    ):
        self.source = source
        self.unk_token_id = unk_token_id
        self.cls_token_id = cls_token_id
        self.sep_token_id = sep_token_id
        self.pad_token_id = pad_token_id
        self.pre_tokenizer = pre_tokenizer or BertPreTokenizer()
        self.normalizer = normalizer or Sequence([Prepend(SEPARATOR), NFKC()])
        self.post_processor = post_processor or ClassifierInputProcessor(
            special_tokens={CLS_TOKEN: cls_token_id, SEP_TOKEN: sep_token_id},
            pad_token_id=pad_token_id,
            max_length=max_length,
        )
        self.reserved_tokens = (CLS_TOKEN, SEP_TOKEN)
        self.model: Optional[WordPieceModel] = None
        self._load_lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: TokenizerConfig, **kwargs) -> "BertTokenizer":
        """Creates an unloaded tokenizer wired to the source named in `config`."""
        return cls(
            source=source_from_config(config),
            unk_token_id=config.unk_token_id,
            cls_token_id=config.cls_token_id,
            sep_token_id=config.sep_token_id,
            pad_token_id=config.pad_token_id,
            max_length=config.max_length,
            **kwargs
        )

    @classmethod
    def from_vocab(cls, vocab: List[str], **kwargs) -> "BertTokenizer":
        """Creates a ready-to-use tokenizer from an in-memory vocabulary."""
        tokenizer = cls(**kwargs)
        tokenizer._build(vocab)
        return tokenizer

    def _build(self, vocab: List[str]) -> None:
        self.model = WordPieceModel(vocab, unk_token_id=self.unk_token_id)

    @property
    def is_loaded(self) -> bool:
        return self.model is not None

    @property
    def vocab_size(self) -> int:
        """Returns the size of the vocabulary."""
        return len(self._require_model().vocab)

    def _require_model(self) -> WordPieceModel:
        if self.model is None:
            raise RuntimeError("Tokenizer vocabulary is not loaded. Await load() first.")
        return self.model

    async def load(self) -> None:
        """
        Fetches the vocabulary and builds the Trie.

        Does nothing if the tokenizer is already loaded.

        Raises:
            LoadError: If the vocabulary cannot be retrieved or parsed.
        """
        async with self._load_lock:
            if self.model is not None:
                return
            if self.source is None:
                raise ValueError("No vocabulary source configured for this tokenizer.")

            logger.info(f"Loading vocabulary from {self.source}...")
            vocab = await self.source.fetch()
            self._build(vocab)
            logger.info(f"Successfully loaded vocab with {len(vocab)} tokens")

    def tokenize(self, text: str) -> List[int]:
        """
        Converts text into vocabulary IDs.

        Never fails on content: a word that cannot be segmented becomes a
        single unknown ID.

        Args:
            text (str): Text to be tokenized.

        Returns:
            List[int]: The token IDs, empty for empty or blank text.
        """
        model = self._require_model()

        output_tokens: List[int] = []
        for word in self.pre_tokenizer.pre_tokenize(text):
            word_text = word.text
            if word_text not in self.reserved_tokens:
                word_text = self.normalizer.normalize_str(word_text)
            output_tokens.extend(model.tokenize(word_text))

        logger.debug(f"Tokenized {len(text)} characters into {len(output_tokens)} ids")
        return output_tokens

    def convert_ids_to_tokens(self, ids: Union[int, List[int]]) -> Union[Optional[str], List[Optional[str]]]:
        """Converts an ID or list of IDs to their vocabulary strings."""
        model = self._require_model()
        if isinstance(ids, int):
            return model.id_to_token(ids)
        return [model.id_to_token(id_) for id_ in ids]

    def encode(
        self,
        text: str,
        max_length: Optional[int] = None,
        return_tensors: Optional[Literal["pt", "np"]] = None,
    ) -> Dict[str, Any]:
        """
        Encodes text into fixed-length classifier inputs.

        Args:
            text (str): Text to encode.
            max_length (Optional[int], optional): Overrides the configured length.
            return_tensors (Optional[Literal["pt", "np"]], optional): Return int64
                tensors of shape (1, max_length) instead of lists.

        Returns:
            Dict[str, Any]: "input_ids", "attention_mask" and "token_type_ids".
        """
        if return_tensors not in (None, "pt", "np"):
            raise ValueError(f"Unsupported return_tensors: {return_tensors}")

        output = self.post_processor.process(self.tokenize(text), max_length=max_length)

        if return_tensors == "pt":
            for key in output:
                output[key] = torch.tensor([output[key]], dtype=torch.long)
        elif return_tensors == "np":
            for key in output:
                output[key] = np.array([output[key]], dtype=np.int64)

        return output

    __call__ = encode


class SharedTokenizer:
    """
    Lazily builds one BertTokenizer and hands the same instance to every caller.

    Callers that arrive while the first load is in flight wait for it instead
    of starting their own. A failed load is not cached.

    The guard is an asyncio.Lock, so single initialization holds for tasks on
    one event loop. Hosts that run several loops in separate threads should
    keep one SharedTokenizer per loop, or await get() once at startup and
    pass the loaded BertTokenizer around; it is read-only after load().

    Args:
        source (VocabularySource): Where the vocabulary is loaded from.
        **tokenizer_kwargs: Passed on to BertTokenizer.
    """
    def __init__(self, source: VocabularySource, **tokenizer_kwargs):
        self.source = source
        self.tokenizer_kwargs = tokenizer_kwargs
        self._tokenizer: Optional[BertTokenizer] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: TokenizerConfig) -> "SharedTokenizer":
        return cls(
            source_from_config(config),
            unk_token_id=config.unk_token_id,
            cls_token_id=config.cls_token_id,
            sep_token_id=config.sep_token_id,
            pad_token_id=config.pad_token_id,
            max_length=config.max_length,
        )

    async def get(self) -> BertTokenizer:
        if self._tokenizer is not None:
            return self._tokenizer

        async with self._lock:
            if self._tokenizer is None:
                logger.info("Loading tokenizer for the first time...")
                tokenizer = BertTokenizer(self.source, **self.tokenizer_kwargs)
                await tokenizer.load()
                self._tokenizer = tokenizer
                logger.info("Tokenizer loaded and cached")
        return self._tokenizer

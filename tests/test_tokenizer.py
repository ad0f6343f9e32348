"""
Tests for greedy longest-match-first segmentation and the public tokenizer API.
"""

import asyncio

import numpy as np
import pytest
import torch

from bert_tokenizer import (
    BertTokenizer,
    SharedTokenizer,
    Token,
    UNK_INDEX,
    CLS_INDEX,
    SEP_INDEX,
    LoadError,
)
from bert_tokenizer.pre_tokenizers import PreTokenizer
from conftest import ListVocabularySource, VOCAB, WORDS


class TestTokenize:
    def test_every_word_maps_to_its_own_id(self, tokenizer, ids):
        for word in ["hello", "world", "play", "ab", "a", "foo", "bar"]:
            assert tokenizer.tokenize(word) == [ids["▁" + word]]

    def test_fragments_into_known_subwords(self, tokenizer, ids):
        assert tokenizer.tokenize("playing") == [ids["▁play"], ids["ing"]]

    def test_longest_match_wins(self, tokenizer, ids):
        assert tokenizer.tokenize("ab") == [ids["▁ab"]]
        assert tokenizer.tokenize("abb") == [ids["▁ab"], ids["b"]]

    def test_unknown_word_is_one_unk(self, tokenizer):
        assert tokenizer.tokenize("xyz") == [UNK_INDEX]

    def test_unknown_tail_discards_partial_matches(self, tokenizer):
        # "▁play" matches but "zng" cannot be covered.
        assert tokenizer.tokenize("playzng") == [UNK_INDEX]

    def test_unk_is_per_token(self, tokenizer, ids):
        assert tokenizer.tokenize("hello xyz world") == [ids["▁hello"], UNK_INDEX, ids["▁world"]]

    def test_punctuation_is_segmented_separately(self, tokenizer, ids):
        assert tokenizer.tokenize("Hello, world!") == [
            ids["▁hello"], ids["▁,"], ids["▁world"], ids["▁!"],
        ]

    def test_case_and_whitespace_insensitive(self, tokenizer):
        assert tokenizer.tokenize("  HELLO \t\n World  ") == tokenizer.tokenize("hello world")

    def test_nfkc_applied_before_lookup(self, tokenizer, ids):
        assert tokenizer.tokenize("\uff28\uff25\uff2c\uff2c\uff2f") == [ids["▁hello"]]

    def test_combining_sequence_matches_vocab(self, tokenizer, ids):
        assert tokenizer.tokenize("\u0130x y") == [ids["▁i\u0307x"], ids["▁y"]]

    def test_empty_and_blank_input(self, tokenizer):
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize("   ") == []
        assert tokenizer.tokenize("\x00\ufffd \n") == []

    def test_reserved_markers_skip_prefix(self, vocab):
        class Passthrough(PreTokenizer):
            def pre_tokenize(self, text):
                return [Token(part, 0) for part in text.split()]

        tokenizer = BertTokenizer.from_vocab(vocab, pre_tokenizer=Passthrough())
        assert tokenizer.tokenize("[CLS] hello [SEP]") == [CLS_INDEX, tokenizer.model.token_to_id("▁hello"), SEP_INDEX]

    def test_duplicate_vocab_entry_last_wins(self):
        vocab = list(VOCAB) + ["▁hello"]
        tokenizer = BertTokenizer.from_vocab(vocab)
        assert tokenizer.tokenize("hello") == [len(vocab) - 1]

    def test_not_loaded_raises(self):
        with pytest.raises(RuntimeError):
            BertTokenizer().tokenize("hello")


class TestVocabLookup:
    def test_vocab_size(self, tokenizer):
        assert tokenizer.vocab_size == len(VOCAB)

    def test_convert_ids_to_tokens(self, tokenizer, ids):
        assert tokenizer.convert_ids_to_tokens(ids["▁play"]) == "▁play"
        assert tokenizer.convert_ids_to_tokens([UNK_INDEX, CLS_INDEX, 10_000]) == ["[UNK]", "[CLS]", None]


class TestEncode:
    def test_encode_lists(self, tokenizer, ids):
        encoded = tokenizer.encode("hello world")
        assert encoded["input_ids"][:4] == [CLS_INDEX, ids["▁hello"], ids["▁world"], SEP_INDEX]
        assert len(encoded["input_ids"]) == 128
        assert sum(encoded["attention_mask"]) == 4
        assert encoded["token_type_ids"] == [0] * 128

    def test_encode_numpy(self, tokenizer):
        encoded = tokenizer.encode("hello", max_length=8, return_tensors="np")
        assert isinstance(encoded["input_ids"], np.ndarray)
        assert encoded["input_ids"].shape == (1, 8)
        assert encoded["input_ids"].dtype == np.int64

    def test_encode_torch(self, tokenizer):
        encoded = tokenizer("hello", max_length=8, return_tensors="pt")
        assert isinstance(encoded["attention_mask"], torch.Tensor)
        assert encoded["attention_mask"].dtype == torch.long
        assert encoded["attention_mask"].tolist() == [[1, 1, 1, 0, 0, 0, 0, 0]]

    def test_encode_bad_return_tensors(self, tokenizer):
        with pytest.raises(ValueError):
            tokenizer.encode("hello", return_tensors="tf")


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_builds_trie(self):
        source = ListVocabularySource(VOCAB)
        tokenizer = BertTokenizer(source)
        assert not tokenizer.is_loaded
        await tokenizer.load()
        assert tokenizer.is_loaded
        assert len(tokenizer.model.trie) == len(set(VOCAB))

    @pytest.mark.asyncio
    async def test_load_is_idempotent(self):
        source = ListVocabularySource(VOCAB)
        tokenizer = BertTokenizer(source)
        await asyncio.gather(tokenizer.load(), tokenizer.load())
        await tokenizer.load()
        assert source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_load_error_leaves_tokenizer_unusable(self, tmp_path):
        from bert_tokenizer import FileVocabularySource

        tokenizer = BertTokenizer(FileVocabularySource(tmp_path / "missing.json"))
        with pytest.raises(LoadError):
            await tokenizer.load()
        assert not tokenizer.is_loaded
        with pytest.raises(RuntimeError):
            tokenizer.tokenize("hello")


class TestSharedTokenizer:
    @pytest.mark.asyncio
    async def test_concurrent_first_use_loads_once(self):
        class SlowSource(ListVocabularySource):
            async def fetch(self):
                await asyncio.sleep(0.01)
                return await super().fetch()

        source = SlowSource(VOCAB)
        shared = SharedTokenizer(source)
        tokenizers = await asyncio.gather(*(shared.get() for _ in range(5)))
        assert source.fetch_count == 1
        assert all(t is tokenizers[0] for t in tokenizers)
        assert await shared.get() is tokenizers[0]

    @pytest.mark.asyncio
    async def test_failed_load_is_retried(self):
        class FlakySource(ListVocabularySource):
            async def fetch(self):
                self.fetch_count += 1
                if self.fetch_count == 1:
                    raise LoadError("temporarily unavailable")
                return list(self.vocab)

        shared = SharedTokenizer(FlakySource(VOCAB))
        with pytest.raises(LoadError):
            await shared.get()
        tokenizer = await shared.get()
        assert tokenizer.tokenize("hello") == [VOCAB.index(WORDS[0])]

    @pytest.mark.asyncio
    async def test_shared_tokenizer_in_threads(self):
        shared = SharedTokenizer(ListVocabularySource(VOCAB))
        tokenizer = await shared.get()
        expected = tokenizer.tokenize("hello, world! playing")
        results = await asyncio.gather(
            *(asyncio.to_thread(tokenizer.tokenize, "hello, world! playing") for _ in range(8))
        )
        assert all(r == expected for r in results)

"""
Shared fixtures: a small BERT-style vocabulary with the reserved IDs at
their usual positions ([PAD]=0, [UNK]=100, [CLS]=101, [SEP]=102).
"""

import json

import pytest

from bert_tokenizer import BertTokenizer, VocabularySource

WORDS = [
    "▁hello",
    "▁world",
    "▁,",
    "▁!",
    "▁.",
    "▁play",
    "ing",
    "▁ab",
    "▁a",
    "b",
    "▁foo",
    "▁bar",
    "\u2581i\u0307x",
    "▁y",
]

VOCAB = (
    ["[PAD]"]
    + [f"[unused{i}]" for i in range(99)]
    + ["[UNK]", "[CLS]", "[SEP]", "[MASK]"]
    + WORDS
)

IDS = {word: index for index, word in enumerate(VOCAB)}


class ListVocabularySource(VocabularySource):
    """Serves an in-memory vocabulary and counts how often it was fetched."""
    def __init__(self, vocab):
        self.vocab = vocab
        self.fetch_count = 0

    async def fetch(self):
        self.fetch_count += 1
        return list(self.vocab)


@pytest.fixture
def vocab():
    return list(VOCAB)


@pytest.fixture
def ids():
    return dict(IDS)


@pytest.fixture
def tokenizer():
    return BertTokenizer.from_vocab(list(VOCAB))


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps(VOCAB, ensure_ascii=False), encoding="utf-8")
    return path

# bert_tokenizer/sources.py

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
import json
import logging
from pathlib import Path
from typing import List, Union

import aiohttp

from .config import TokenizerConfig

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the vocabulary cannot be retrieved or parsed."""


def parse_vocab(raw: Union[str, bytes], origin: str) -> List[str]:
    """
    Parses a vocabulary asset.

    Args:
        raw (Union[str, bytes]): UTF-8 JSON text holding an array of strings.
        origin (str): Where the text came from, used in error messages.

    Returns:
        List[str]: The vocabulary. A string's position is its ID.
    """
    try:
        vocab = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise LoadError(f"Vocabulary at {origin} is not valid JSON: {e}") from e

    if not isinstance(vocab, list):
        raise LoadError(f"Vocabulary at {origin} must be a JSON array, got {type(vocab).__name__}.")
    for i, entry in enumerate(vocab):
        if not isinstance(entry, str):
            raise LoadError(f"Vocabulary entry {i} at {origin} is not a string: {entry!r}")
    return vocab


class VocabularySource:
    """Base class for vocabulary sources (Optional Interface)."""
    async def fetch(self) -> List[str]:
        """
        Retrieves and parses the vocabulary.

        Returns:
            List[str]: The vocabulary strings in ID order.

        Raises:
            LoadError: If the asset is unreachable, unreadable or malformed.
        """
        raise NotImplementedError


class FileVocabularySource(VocabularySource):
    """
    Reads the vocabulary JSON from the local filesystem.

    Args:
        path (Union[str, Path]): Path to the vocabulary JSON file.
    """
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> str:
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

    async def fetch(self) -> List[str]:
        try:
            raw = await asyncio.to_thread(self._read)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading vocab file: {self.path}")
            raise LoadError(f"Could not read vocab file at {self.path}: {e}") from e
        return parse_vocab(raw, str(self.path))

    def __repr__(self) -> str:
        return f"FileVocabularySource({str(self.path)!r})"


class UrlVocabularySource(VocabularySource):
    """
    Fetches the vocabulary JSON over HTTP.

    Args:
        url (str): Location of the vocabulary JSON.
        timeout (float, optional): Total request timeout in seconds. Defaults to 30.
    """
    def __init__(self, url: str, timeout: float = 30.0):
        self.url = url
        self.timeout = timeout

    async def fetch(self) -> List[str]:
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(self.url) as response:
                    if not response.ok:
                        raise LoadError(f"HTTP error fetching vocabulary from {self.url}: status {response.status}")
                    raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error loading vocab from URL: {self.url}")
            raise LoadError(f"Failed to load vocabulary from {self.url}: {e}") from e
        return parse_vocab(raw, self.url)

    def __repr__(self) -> str:
        return f"UrlVocabularySource({self.url!r})"


def source_from_config(config: TokenizerConfig) -> VocabularySource:
    """Picks the vocabulary source named by the configuration."""
    if config.vocab_path is not None:
        return FileVocabularySource(config.vocab_path)
    return UrlVocabularySource(config.vocab_url, timeout=config.request_timeout)

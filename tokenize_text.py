# bert_tokenizer_project/tokenize_text.py

"""
Command-line entry point: tokenize a single text with the BERT vocabulary.

Prints the raw token IDs, or with --encode the fixed-length classifier
inputs ([CLS] ... [SEP], padded), as JSON on stdout.

This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

Original Author: Michael Morgan
Date: 2025-11-24
Github: https://github.com/Mmorgan-ML
Email: mmorgankorea@gmail.com
"""

import sys
import json
import asyncio
import argparse
import logging

from bert_tokenizer import BertTokenizer, TokenizerConfig, LoadError

DEFAULT_VOCAB_PATH = "public/static/vocab.json"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Tokenize text with a BERT WordPiece vocabulary")
    parser.add_argument('text', type=str, help="Text to tokenize.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--vocab_path', type=str, default=None, help=f"Path to vocab.json (default: {DEFAULT_VOCAB_PATH}).")
    source.add_argument('--vocab_url', type=str, default=None, help="URL of vocab.json.")
    parser.add_argument('--encode', action='store_true', help="Print padded classifier inputs instead of raw IDs.")
    parser.add_argument('--max_length', type=int, default=128, help="Classifier input length.")
    parser.add_argument('--show_tokens', action='store_true', help="Also print the vocabulary string of every ID.")
    args = parser.parse_args(argv)
    if args.vocab_path is None and args.vocab_url is None:
        args.vocab_path = DEFAULT_VOCAB_PATH
    return args


async def run(args: argparse.Namespace) -> dict:
    config = TokenizerConfig(vocab_path=args.vocab_path, vocab_url=args.vocab_url, max_length=args.max_length)
    tokenizer = BertTokenizer.from_config(config)
    await tokenizer.load()

    if args.encode:
        result = tokenizer.encode(args.text)
    else:
        result = {"input_ids": tokenizer.tokenize(args.text)}
    if args.show_tokens:
        result["tokens"] = tokenizer.convert_ids_to_tokens(result["input_ids"])
    return result


def main(argv=None) -> int:
    args = parse_arguments(argv)
    try:
        result = asyncio.run(run(args))
    except LoadError as e:
        logger.error(f"Failed to load vocabulary: {e}")
        return 1
    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

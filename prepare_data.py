# bert_tokenizer_project/prepare_data.py

"""
Data preparation script: encodes a text file (one sample per line) into a
fixed-length (num_samples, max_length) int64 matrix of classifier inputs.

Two files are written: <output>.npy holding input_ids and
<output>_mask.npy holding the matching attention mask.

This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

Original Author: Michael Morgan
Date: 2025-11-24
Github: https://github.com/Mmorgan-ML
Email: mmorgankorea@gmail.com
Twitter: @Mmorgan_ML
"""

import os
import sys
import asyncio
import argparse
import logging
from pathlib import Path
from typing import Tuple

import numpy as np
from tqdm import tqdm

from bert_tokenizer import BertTokenizer, TokenizerConfig, LoadError

# --- Configuration ---
DEFAULT_VOCAB_PATH = "public/static/vocab.json"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def encode_file(tokenizer: BertTokenizer, input_file: Path, max_length: int) -> Tuple[np.ndarray, np.ndarray]:
    """Encodes every non-empty line of `input_file`."""
    total_size = os.path.getsize(input_file)
    input_ids = []
    attention_mask = []
    unk_count = 0

    with open(input_file, "r", encoding="utf-8", errors="ignore") as f_in:
        with tqdm(total=total_size, unit="B", unit_scale=True, desc="Encoding") as pbar:
            for line in f_in:
                pbar.update(len(line.encode('utf-8')))
                text = line.strip()
                if not text:
                    continue
                encoded = tokenizer.encode(text, max_length=max_length)
                input_ids.append(encoded["input_ids"])
                attention_mask.append(encoded["attention_mask"])
                unk_count += encoded["input_ids"].count(tokenizer.unk_token_id)

    if not input_ids:
        return np.zeros((0, max_length), dtype=np.int64), np.zeros((0, max_length), dtype=np.int64)

    logger.info(f"Encoded {len(input_ids)} samples ({unk_count} unknown words).")
    return np.array(input_ids, dtype=np.int64), np.array(attention_mask, dtype=np.int64)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Encode a text file into classifier inputs")
    parser.add_argument('--input', type=str, required=True, help="Text file, one sample per line.")
    parser.add_argument('--output', type=str, required=True, help="Output .npy path for input_ids.")
    parser.add_argument('--vocab_path', type=str, default=DEFAULT_VOCAB_PATH, help="Path to vocab.json.")
    parser.add_argument('--max_length', type=int, default=128, help="Classifier input length.")
    return parser.parse_args(argv)


def prepare(argv=None) -> int:
    args = parse_arguments(argv)
    input_file = Path(args.input)
    if not input_file.exists():
        logger.error(f"Input file '{input_file}' not found.")
        return 1

    config = TokenizerConfig(vocab_path=args.vocab_path, max_length=args.max_length)
    tokenizer = BertTokenizer.from_config(config)
    logger.info(f"Loading tokenizer from {args.vocab_path}...")
    try:
        asyncio.run(tokenizer.load())
    except LoadError as e:
        logger.error(f"Could not load vocabulary: {e}")
        return 1

    input_ids, attention_mask = encode_file(tokenizer, input_file, args.max_length)

    output_file = Path(args.output)
    mask_file = output_file.with_name(output_file.stem + "_mask.npy")
    np.save(output_file, input_ids)
    np.save(mask_file, attention_mask)
    logger.info(f"Success! Saved {output_file} and {mask_file} with shape {input_ids.shape}")
    return 0


if __name__ == "__main__":
    sys.exit(prepare())

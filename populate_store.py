#!/usr/bin/env python3
"""
Seed the entry store from a JSON Q&A dataset.

Clears the configured collection, then batch-writes every valid row.

Usage:
    python populate_store.py            # wikipedia_qa_dataset.json
    python populate_store.py --sample   # wikipedia_qa_sample.json
    python populate_store.py --dataset path/to/data.json
"""
import argparse
import logging
import os
import sys
import time

from dotenv import load_dotenv

from qa_chatbot.config_loader import load_config_from_env
from qa_chatbot.data_loader import QADatasetLoader
from qa_chatbot.exceptions import ChatbotError
from qa_chatbot.store import create_entry_store

BATCH_SIZE = 500
FULL_DATASET = "wikipedia_qa_dataset.json"
SAMPLE_DATASET = "wikipedia_qa_sample.json"

logger = logging.getLogger("populate_store")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a Q&A dataset into the entry store")
    parser.add_argument("--sample", action="store_true", help=f"Load {SAMPLE_DATASET} instead of the full dataset")
    parser.add_argument("--dataset", help="Explicit path to a JSON dataset")
    parser.add_argument("--batch-size", type=int, default=BATCH_SIZE)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    args = parse_args(argv)

    dataset = args.dataset or (SAMPLE_DATASET if args.sample else FULL_DATASET)
    if not os.path.exists(dataset):
        logger.error(f"Dataset file '{dataset}' not found!")
        return 1

    documents = QADatasetLoader(dataset).load_documents()
    logger.info(f"Total Q&A pairs to load from {dataset}: {len(documents)}")

    try:
        config = load_config_from_env(use_dotenv=False)
        store = create_entry_store(config)

        start = time.time()
        written = store.replace_all(documents, batch_size=args.batch_size)
    except ChatbotError as e:
        logger.error(f"Error populating store: {e}")
        return 1

    logger.info(f"Successfully loaded {written} Q&A pairs in {time.time() - start:.1f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())

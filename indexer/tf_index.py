"""
Term-frequency index: build from a folder of XML documents, save, load, check
"""
import json
import logging
import os
from collections import Counter

from .lexer import Lexer, to_term
from .xml_reader import read_entire_xml_file

DEFAULT_INDEX_PATH = "index.json"

logger = logging.getLogger(__name__)


def build_tf(content):
    """Count the upper-cased terms of a piece of text"""
    tf = Counter()
    for token in Lexer(content):
        tf[to_term(token)] += 1
    return dict(tf)


def top_terms(tf, n=20):
    """Return the n most frequent (term, count) pairs, most frequent first"""
    return sorted(tf.items(), key=lambda item: (-item[1], item[0]))[:n]


def index_folder(dir_path):
    """
    Build a TF index of every file directly inside a directory

    Args:
        dir_path (str): Directory holding the XML documents

    Returns:
        dict: Mapping of file path to its term frequencies
    """
    tf_index = {}

    for entry in sorted(os.scandir(dir_path), key=lambda e: e.path):
        if not entry.is_file():
            logger.debug(f"Skipping {entry.path}: not a regular file")
            continue

        print(f"indexing {entry.path}...")
        content = read_entire_xml_file(entry.path)
        tf = build_tf(content)
        logger.debug(f"{entry.path}: {len(tf)} distinct terms, top: {top_terms(tf, 5)}")
        tf_index[entry.path] = tf

    return tf_index


def save_index(tf_index, index_path=DEFAULT_INDEX_PATH):
    with open(index_path, 'w', encoding='utf-8') as f:
        json.dump(tf_index, f)
    logger.info(f"Wrote {len(tf_index)} documents to {index_path}")


def load_index(index_path=DEFAULT_INDEX_PATH):
    """Read an index file, raising ValueError if it is not a path -> TF mapping"""
    with open(index_path, 'r', encoding='utf-8') as f:
        tf_index = json.load(f)

    if not isinstance(tf_index, dict):
        raise ValueError(f"{index_path} does not contain an index object")
    for path, tf in tf_index.items():
        if not isinstance(tf, dict) or not all(isinstance(count, int) for count in tf.values()):
            raise ValueError(f"{index_path}: invalid term frequencies for {path}")

    return tf_index


def check_index(index_path=DEFAULT_INDEX_PATH):
    """Load an index file and report how many documents it holds"""
    print(f"Reading {index_path} index file...")
    tf_index = load_index(index_path)
    print(f"{index_path} contains {len(tf_index)} documents")
    return len(tf_index)

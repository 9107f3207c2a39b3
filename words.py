"""Reads the candidate word list"""
from pathlib import Path
from typing import List

import wordlists

WORDS_FILE = Path(wordlists.__file__).parent / 'words.txt'


def read_all(path=WORDS_FILE) -> List[str]:
    """Reads all the lines"""
    with open(path, encoding='utf-8') as f:
        return f.readlines()


def load_words(path=WORDS_FILE) -> List[str]:
    """ Candidate words in file order. Entries of the wrong length are left for the search to skip"""
    words = (w.strip().lower() for w in read_all(path))
    return [w for w in words if w]

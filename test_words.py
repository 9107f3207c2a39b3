from pathlib import Path

import wordlists
from words import WORDS_FILE, load_words, read_all


def test_bundled_list():
    words = load_words()
    assert words[:3] == ['about', 'above', 'abuse']
    assert all(len(w) == 5 and w.isalpha() and w.islower() for w in words)


def test_bundled_list_lives_in_its_package():
    assert WORDS_FILE == Path(wordlists.__file__).parent / 'words.txt'
    assert WORDS_FILE.exists()


def test_load_keeps_order_and_bad_entries(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('zebra\n\nApple\n  crane \ntoolong\napple\n')
    assert load_words(path) == ['zebra', 'apple', 'crane', 'toolong', 'apple']


def test_read_all(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('crane\napple\n')
    assert read_all(path) == ['crane\n', 'apple\n']

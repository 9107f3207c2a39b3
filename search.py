from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from tqdm import tqdm

from builder import SearchState, ingest
from shapes import classify
from wordle import WIDTH, score

LOGGER = logging.getLogger(__name__)


class InputShapeError(ValueError):
    """A word that is not WIDTH letters long"""


class NoSolutionFound(LookupError):
    """The word list has no crewmate board for the target"""


def normalize_target(word: str) -> str:
    word = word.lower()
    if len(word) != WIDTH:
        raise InputShapeError(f'The word must be exactly {WIDTH} characters long: {word!r}')
    return word


def find(target: str, words: Iterable[str], progress: bool = False) -> Optional[List[str]]:
    """ Scans the words in order and returns the first complete board, or None"""
    state: SearchState = {}
    n = 0
    with tqdm(words, desc=f'Searching for {target}', unit='word', disable=not progress) as candidates:
        for candidate in candidates:
            n += 1
            if len(candidate) != WIDTH:
                LOGGER.debug(f'Skipping {candidate!r}')
                continue
            match = classify(score(target, candidate))
            if not match:
                continue
            board = ingest(state, match, candidate)
            if board:
                LOGGER.info(f'Found board for {target} after {n} words ({board.ready_context}, '
                            f'{match.background.name.lower()} background)')
                return board.board()

    LOGGER.debug(f'No board for {target} in {n} words')
    return None


def solve(target: str, words: Iterable[str], progress: bool = False) -> List[str]:
    target = normalize_target(target)
    result = find(target, words, progress=progress)
    if result is None:
        raise NoSolutionFound(f'No solution found for the word "{target}".')
    return result

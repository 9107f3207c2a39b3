"""Wordle feedback colours"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

WIDTH = 5


class Color(Enum):
    GRAY = '-'
    YELLOW = 'Y'
    GREEN = 'G'

    # Feedback names
    NO_MATCH = '-'
    MISPLACED = 'Y'
    CORRECT = 'G'

    def other(self, second: Color) -> Color:
        """The colour that is neither self nor second; GRAY if they are the same"""
        if self == second:
            return Color.GRAY
        return ({Color.GRAY, Color.YELLOW, Color.GREEN} - {self, second}).pop()


def score(target: str, guess: str) -> Tuple[Color, ...]:
    outcome = [Color.GRAY] * len(guess)
    used = [False] * len(target)
    # Handle greens
    for i in range(len(guess)):
        if guess[i] == target[i]:
            outcome[i] = Color.GREEN
            used[i] = True
    # Handle yellows
    for i in range(len(guess)):
        if outcome[i] != Color.GRAY:
            continue
        for j in range(len(target)):
            if not used[j] and guess[i] == target[j]:
                outcome[i] = Color.YELLOW
                used[j] = True
                break
    return tuple(outcome)


def as_str(pattern: Iterable[Color]) -> str:
    return ''.join(c.value for c in pattern)


def as_pattern(text: str) -> Tuple[Color, ...]:
    return tuple(Color(c) for c in text)

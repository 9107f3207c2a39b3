"""Recognizes which row of the crewmate a line of colours can draw.

The rows, with A the shape colour, B the background and C the visor, are:

    Empty   BBBBB
    Head    AAABB   BAAAB   BBAAA
    Eyes    CCAAB   BCCAA   (either pair may be the visor)
    Body    AAAAB   BAAAA
    Legs    ABABB   BABAB   BBABA

Shapes that sit against one edge are 'hugging' that side; the middle head and
legs layouts are centered and fit either mirror image of the figure.
"""
from typing import Optional, Sequence, Tuple

from model import Hugging, RowKind, RowMatch
from wordle import WIDTH, Color

Pattern = Sequence[Color]


def four_in_a_row(c: Pattern) -> Optional[Tuple[Color, Color, Hugging]]:
    """ (background, shape, hugging) for AAAAB or BAAAA"""
    if c[0] == c[1] == c[2] == c[3]:
        return c[4], c[0], Hugging.LEFT
    if c[1] == c[2] == c[3] == c[4]:
        return c[0], c[1], Hugging.RIGHT
    return None


def three_in_a_row(c: Pattern) -> Optional[Tuple[Color, Color, Optional[Hugging]]]:
    """ (background, shape, hugging) for AAABB, BAAAB or BBAAA; hugging is None in the middle"""
    if c[0] == c[1] == c[2] and c[3] == c[4]:
        return c[3], c[0], Hugging.LEFT
    if c[1] == c[2] == c[3] and c[0] == c[4]:
        return c[0], c[1], None
    if c[2] == c[3] == c[4] and c[0] == c[1]:
        return c[0], c[2], Hugging.RIGHT
    return None


def two_separated(c: Pattern) -> Optional[Tuple[Color, Color, Optional[Hugging]]]:
    """ (background, shape, hugging) for ABABB, BABAB or BBABA; hugging is None in the middle"""
    if c[0] == c[2] and c[1] == c[3] == c[4]:
        return c[1], c[0], Hugging.LEFT
    if c[1] == c[3] and c[0] == c[2] == c[4]:
        return c[0], c[1], None
    if c[2] == c[4] and c[0] == c[1] == c[3]:
        return c[0], c[2], Hugging.RIGHT
    return None


def eyes(c: Pattern) -> Optional[Tuple[Color, Color, Hugging]]:
    """ (left pair colour, right pair colour, hugging) for a three colour line.

    Only valid when the line is known to hold exactly three colours.
    """
    if c[0] == c[1] and c[2] == c[3]:
        return c[0], c[2], Hugging.LEFT
    if c[1] == c[2] and c[3] == c[4]:
        return c[1], c[3], Hugging.RIGHT
    return None


def classify(pattern: Pattern) -> Optional[RowMatch]:
    if len(pattern) != WIDTH:
        return None
    n_colors = len(set(pattern))

    if n_colors == 1:
        background = pattern[0]
        # An all green line would give the answer away
        if background == Color.GREEN:
            return None
        return RowMatch(RowKind.EMPTY, background)

    if n_colors == 3:
        found = eyes(pattern)
        if not found:
            return None
        left, right, hugging = found
        return RowMatch(RowKind.EYES, left.other(right), left, hugging, right)

    # Two colours
    for kind, test in ((RowKind.BODY, four_in_a_row),
                       (RowKind.HEAD, three_in_a_row),
                       (RowKind.LEGS, two_separated)):
        found = test(pattern)
        if found:
            background, shape, hugging = found
            return RowMatch(kind, background, shape, hugging)
    return None

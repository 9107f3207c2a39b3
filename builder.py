"""Collects classified words into boards, one board per background colour"""
from typing import Dict, Optional

from model import BoardAssembly, Facing, Hugging, RowKind, RowMatch, SlotContext
from wordle import Color

SearchState = Dict[Color, BoardAssembly]


def facing_for(hugging: Hugging) -> Facing:
    """ A shape pushed against one side looks toward the open side"""
    return Facing.RIGHT if hugging == Hugging.LEFT else Facing.LEFT


def contexts_for(match: RowMatch) -> [SlotContext]:
    """ The slot contexts a classified row can be used in, in the order they are written"""
    kind = match.kind
    if kind == RowKind.EMPTY:
        return []
    if kind == RowKind.EYES:
        return [SlotContext(match.shape, Facing.RIGHT, match.hugging),
                SlotContext(match.second, Facing.LEFT, match.hugging)]
    if kind == RowKind.BODY:
        return [SlotContext(match.shape, Facing.RIGHT, match.hugging),
                SlotContext(match.shape, Facing.LEFT, match.hugging)]
    # Head or legs
    if match.hugging is None:
        return [SlotContext(match.shape, Facing.LEFT, Hugging.RIGHT),
                SlotContext(match.shape, Facing.RIGHT, Hugging.LEFT)]
    return [SlotContext(match.shape, facing_for(match.hugging), match.hugging)]


def ingest(state: SearchState, match: RowMatch, word: str) -> Optional[BoardAssembly]:
    """ Adds the word to the board for its background. Returns that board if it is now complete"""
    board = state.get(match.background)
    if board is None:
        state[match.background] = board = BoardAssembly()

    if match.kind == RowKind.EMPTY:
        board.fill_empty(word)
    else:
        for context in contexts_for(match):
            board.fill(context, match.kind, word)

    return board if board.is_ready() else None

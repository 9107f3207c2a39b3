from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional

from wordle import Color


class Facing(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Hugging(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class RowKind(Enum):
    EMPTY = 'empty'
    HEAD = 'head'
    EYES = 'eyes'
    BODY = 'body'
    LEGS = 'legs'


class RowMatch(NamedTuple):
    kind: RowKind
    background: Color
    shape: Optional[Color] = None  # For eyes, the colour of the left pair
    hugging: Optional[Hugging] = None  # None when centered
    second: Optional[Color] = None  # For eyes, the colour of the right pair

    def centered(self) -> bool:
        return self.kind != RowKind.EMPTY and self.hugging is None


class SlotContext(NamedTuple):
    shape: Color
    facing: Facing
    hugging: Hugging

    def __str__(self):
        return f"{self.shape.name.lower()} facing {self.facing.value}, hugging {self.hugging.value}"


@dataclass
class RowAssembly:
    head: Optional[str] = None
    eyes: Optional[str] = None
    body: Optional[str] = None
    legs: Optional[str] = None

    def fill(self, kind: RowKind, word: str) -> bool:
        """ Sets the slot for this kind of row if it is still empty. Returns True if it was written"""
        if kind == RowKind.EMPTY:
            raise ValueError('Empty rows belong to the board, not a row assembly')
        slot = kind.value
        if getattr(self, slot) is not None:
            return False
        setattr(self, slot, word)
        return True

    def is_full(self) -> bool:
        return all(w is not None for w in (self.head, self.eyes, self.body, self.legs))


@dataclass
class BoardAssembly:
    """All the rows found so far that share one background colour"""
    empty: Optional[str] = None
    rows: Dict[SlotContext, RowAssembly] = field(default_factory=dict)
    ready_context: Optional[SlotContext] = None

    def fill_empty(self, word: str) -> bool:
        if self.empty is not None:
            return False
        self.empty = word
        return True

    def fill(self, context: SlotContext, kind: RowKind, word: str) -> bool:
        row = self.rows.get(context)
        if row is None:
            self.rows[context] = row = RowAssembly()
        written = row.fill(kind, word)
        # The first context to fill up is the one we use
        if self.ready_context is None and row.is_full():
            self.ready_context = context
        return written

    def is_ready(self) -> bool:
        return self.empty is not None and self.ready_context is not None

    def board(self) -> List[str]:
        if not self.is_ready():
            raise ValueError('Board is not complete')
        row = self.rows[self.ready_context]
        return [self.empty, row.head, row.eyes, row.body, row.legs, self.empty]

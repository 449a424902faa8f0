from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import InvalidCardRank, InvalidCardSuit


class Suit(Enum):
    SPADES = "S"
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def role(self) -> "Role":
        return SUIT_ROLES[self]

    @staticmethod
    def parse(code: str) -> "Suit":
        try:
            return Suit(code.upper())
        except ValueError as e:
            raise InvalidCardSuit(f"Unknown suit: {code!r}") from e


class Rank(IntEnum):
    """Card rank; the integer value is the card's weight."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        return _FACE_LABELS.get(self, str(int(self)))

    @staticmethod
    def parse(code: str) -> "Rank":
        code = code.upper()
        if code == "T":
            return Rank.TEN
        for rank in Rank:
            if rank.label == code:
                return rank
        raise InvalidCardRank(f"Unknown rank: {code!r}")


class Role(Enum):
    MONSTER = "monster"
    WEAPON = "weapon"
    POTION = "potion"


SUIT_ROLES: dict[Suit, Role] = {
    Suit.SPADES: Role.MONSTER,
    Suit.CLUBS: Role.MONSTER,
    Suit.DIAMONDS: Role.WEAPON,
    Suit.HEARTS: Role.POTION,
}

_SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
}

_FACE_LABELS: dict[Rank, str] = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

ALL_RANKS: tuple[Rank, ...] = tuple(Rank)
NUMBERED_RANKS: tuple[Rank, ...] = tuple(r for r in Rank if r <= Rank.TEN)
BLACK_SUITS: tuple[Suit, ...] = (Suit.SPADES, Suit.CLUBS)
RED_SUITS: tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS)


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def weight(self) -> int:
        return int(self.rank)

    @property
    def role(self) -> Role:
        return self.suit.role

    @property
    def code(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def is_monster(self) -> bool:
        return self.role is Role.MONSTER

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"

    @staticmethod
    def parse(code: str) -> "Card":
        """Parse a short card code such as ``QS``, ``10H`` or ``th``."""
        code = code.strip()
        if len(code) < 2:
            raise InvalidCardRank(f"Card code too short: {code!r}")
        return Card(rank=Rank.parse(code[:-1]), suit=Suit.parse(code[-1]))

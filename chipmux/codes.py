from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

KEY_BASE = 0  # Key counter value after a reset


class ChipCode(NamedTuple):
    """One default code record: two chip values and a type tag."""
    p1: int
    p2: int
    type: int

    def as_row(self) -> list[int]:
        return [self.p1, self.p2, self.type]


DEFAULT_CHIP_CODES = (
    ChipCode(p1=1, p2=-1, type=2),
    ChipCode(p1=1, p2=1, type=2),
)


class UnsupportedCodeSourceError(NotImplementedError):
    """Raised when a code source has no generator behind it."""


def codebook() -> np.ndarray:
    """
    Default K x L chip code grid (K=2 rows of length L=3).
    Returns a fresh copy on every call.
    """
    return np.array([code.as_row() for code in DEFAULT_CHIP_CODES], dtype=np.int64)


class CodeBook:
    """
    K chip code rows of length L.

    spread_width (K) sets how many chips each bit expands into.
    combine_modulus (L) sets which code column weights each output chip.
    The two are independent: spreading only ever reads the first K
    entries of a row, combining walks all L of them.
    """

    def __init__(self, codes):
        grid = np.array(codes, dtype=np.int64)
        if grid.ndim != 2:
            raise ValueError(f"Chip codes must be a 2-D grid, got shape {grid.shape}")
        rows, length = grid.shape
        if 0 < length < rows:
            raise ValueError(
                f"Code rows of length {length} are too short to spread {rows} chips per bit"
            )
        self._codes = grid
        self._codes.setflags(write=False)

    @classmethod
    def default(cls) -> "CodeBook":
        return cls(codebook())

    @property
    def codes(self) -> np.ndarray:
        return self._codes

    @property
    def spread_width(self) -> int:
        return self._codes.shape[0]

    @property
    def combine_modulus(self) -> int:
        return self._codes.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._codes.shape

    @property
    def is_degenerate(self) -> bool:
        return self.spread_width == 0 or self.combine_modulus == 0

    def __eq__(self, other):
        if not isinstance(other, CodeBook):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._codes, other._codes))

    def __repr__(self):
        return f"CodeBook({self._codes.tolist()})"


# ============================================================================
# Code sources
# ============================================================================
@dataclass(frozen=True)
class FixedCodes:
    """A hard-coded book. None means the default book."""
    codes: Optional[tuple] = None

    def materialize(self) -> CodeBook:
        if self.codes is None:
            return CodeBook.default()
        return CodeBook(self.codes)


@dataclass(frozen=True)
class RandomCodes:
    """Randomized code book. Accepted as a mode, but no generator exists yet."""
    seed: Optional[int] = None

    def materialize(self) -> CodeBook:
        raise UnsupportedCodeSourceError(
            "Random chip codes are not implemented; use FixedCodes"
        )

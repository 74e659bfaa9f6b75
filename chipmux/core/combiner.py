import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

from chipmux.codes import (
    KEY_BASE, CodeBook, FixedCodes, RandomCodes, UnsupportedCodeSourceError,
)
from chipmux.core.bitvector import Symbols, build
from chipmux.core.spreader import spread
from chipmux.utils.formats import OutputMode, render_input, signal_to_string
from chipmux.utils.input_io import load_input

logger = logging.getLogger("ChipMux")

CodeSource = Union[FixedCodes, RandomCodes]


# ============================================================================
# Spreading Context
# ============================================================================
@dataclass
class SpreadingContext:
    """
    Caller-owned code book and key counter.

    Each caller keeps its own context. A context is not locked, so sharing
    one between threads needs external mutual exclusion.
    """
    source: CodeSource = field(default_factory=FixedCodes)
    key: int = KEY_BASE
    book: Optional[CodeBook] = None

    def __post_init__(self):
        if self.book is None:
            self.reset()

    def reset(self):
        """Restore the key counter and re-materialize the book from its source."""
        self.key = KEY_BASE
        self.book = self.source.materialize()
        logger.debug(f"Context reset: key={self.key} book={self.book.shape}")

    @property
    def codes(self) -> np.ndarray:
        return self.book.codes


def combine(spread_grid: np.ndarray, book: CodeBook) -> np.ndarray:
    """
    Superpose spread rows into one composite signal.

    out[c] = sum over rows i of codes[i, c % L] * spread_grid[i, c]
    """
    spread_grid = np.asarray(spread_grid, dtype=np.int64)
    if spread_grid.ndim != 2:
        raise ValueError(f"Spread grid must be 2-D, got shape {spread_grid.shape}")

    combine_modulus = book.combine_modulus
    if book.spread_width == 0 or combine_modulus == 0:
        return np.zeros(0, dtype=np.int64)
    if spread_grid.shape[0] != book.spread_width:
        raise ValueError(
            f"Spread grid has {spread_grid.shape[0]} rows but the code book has {book.spread_width}"
        )

    columns = np.arange(spread_grid.shape[1]) % combine_modulus
    weights = book.codes[:, columns]
    return np.sum(weights * spread_grid, axis=0, dtype=np.int64)


def multiplex(bits: Symbols, use_random_codes: bool = False,
              context: Optional[SpreadingContext] = None) -> np.ndarray:
    """
    Spread and combine a bit string into a composite signal.

    With use_random_codes False the context is reset to its fixed book first,
    so repeated calls with the same input give the same signal. Random codes
    have no generator and raise UnsupportedCodeSourceError.
    Without a context a private one is created for this call.
    """
    if use_random_codes:
        raise UnsupportedCodeSourceError(
            "Random chip codes are not implemented; call with use_random_codes=False"
        )

    if context is None:
        context = SpreadingContext()
    else:
        context.reset()

    book = context.book
    bit_grid = build(bits, book.spread_width)
    chip_grid = spread(bit_grid, book)
    composite = combine(chip_grid, book)
    logger.debug(
        f"Multiplexed {len(bits)} symbols: bits={bit_grid.shape} "
        f"chips={chip_grid.shape} signal={composite.shape}"
    )
    return composite


# ============================================================================
# Application Operations
# ============================================================================
def perform_output(text: str, mode: OutputMode = OutputMode.BYTE_BITS,
                   is_file: bool = False, files: Optional[Sequence[str]] = None) -> str:
    """Load input (text or file) and render it as a bit string."""
    data = load_input(text, is_file, files)
    return render_input(data, mode)


def perform_multiplexing(data_bits: str, context: Optional[SpreadingContext] = None) -> str:
    """Multiplex a bit string and return the signal as concatenated decimals."""
    return signal_to_string(multiplex(data_bits, False, context))

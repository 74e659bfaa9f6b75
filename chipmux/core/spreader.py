import logging

import numpy as np

from chipmux.codes import CodeBook

logger = logging.getLogger("ChipMux")


def spread(bits: np.ndarray, book: CodeBook) -> np.ndarray:
    """
    Expand a (K, B) bit grid into a (K, B*K) chip grid.

    Bit (i, j) becomes block j of row i: the first K entries of code row i,
    kept as-is when the bit is > 0 and negated otherwise.
    Entries of a code row past index K are never used here.
    """
    bits = np.asarray(bits, dtype=np.int64)
    if bits.ndim != 2:
        raise ValueError(f"Bit grid must be 2-D, got shape {bits.shape}")

    spread_width = book.spread_width
    if bits.shape[0] != spread_width:
        raise ValueError(
            f"Bit grid has {bits.shape[0]} rows but the code book has {spread_width}"
        )

    num_bits = bits.shape[1]
    if spread_width == 0 or book.combine_modulus == 0:
        return np.zeros((spread_width, 0), dtype=np.int64)

    chips = book.codes[:, :spread_width]                 # (K, K)
    signs = np.where(bits > 0, 1, -1)                    # (K, B)
    blocks = signs[:, :, np.newaxis] * chips[:, np.newaxis, :]  # (K, B, K)
    grid = blocks.reshape(spread_width, num_bits * spread_width)

    logger.debug(f"Spread {bits.shape} bit grid to {grid.shape} chips")
    return grid

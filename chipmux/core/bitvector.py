import logging
from typing import Sequence, Union

import numpy as np

logger = logging.getLogger("ChipMux")

Symbols = Union[str, Sequence[str]]

ZERO_CODE_POINT = ord('0')


def build(symbols: Symbols, partitions: int) -> np.ndarray:
    """
    Split a bit string into `partitions` equal rows.

    Each symbol is mapped to (code point - '0'), so '0' -> 0 and '1' -> 1.
    Any other character gives its raw offset; nothing is clamped or rejected.
    B = len(symbols) // partitions columns are produced and the trailing
    len(symbols) % partitions symbols are dropped.
    Returns an int64 grid of shape (partitions, B).
    """
    if partitions <= 0:
        return np.zeros((max(partitions, 0), 0), dtype=np.int64)

    bits_per_part = len(symbols) // partitions
    used = bits_per_part * partitions
    dropped = len(symbols) - used
    if dropped:
        logger.warning(
            f"Input length {len(symbols)} is not a multiple of {partitions}; "
            f"dropping {dropped} trailing symbol(s)"
        )

    values = np.fromiter((ord(s) for s in symbols[:used]), dtype=np.int64, count=used)
    return (values - ZERO_CODE_POINT).reshape(partitions, bits_per_part)


def build_from_chars(chars: Sequence[str], partitions: int) -> np.ndarray:
    """Legacy character-array entry. Same mapping as build()."""
    return build(list(chars), partitions)


def build_vector(bit_stream: str, char_stream: Sequence[str], partitions: int) -> np.ndarray:
    """Use the bit string when given, otherwise fall back to the character array."""
    if bit_stream:
        return build(bit_stream, partitions)
    return build_from_chars(char_stream, partitions)

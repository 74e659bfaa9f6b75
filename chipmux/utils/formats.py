"""
Conversions between display text, byte/character arrays and bit strings.

These sit around the multiplexer: they turn a text field into a bit string
and a composite signal back into display text. None of them feed back into
the spreading rules.
"""
from enum import Enum
from typing import Iterable

import numpy as np

TEXT_ENCODING = 'utf-16-le'
CHAR_BITS = 16
BYTE_BITS = 8


class OutputMode(Enum):
    RAW_BINARY = 0  # Unpadded binary of each encoded byte
    CHAR_BITS = 1   # 16-bit run per character
    ALPHA_BITS = 2  # Same rendering as CHAR_BITS (alphabet-independent)
    BYTE_BITS = 3   # 8-bit run per encoded byte


def encode_text(text: str) -> bytes:
    return text.encode(TEXT_ENCODING)


def text_to_chars(text: str) -> list[str]:
    return list(text)


def to_binary_string(data: Iterable[int]) -> str:
    """
    Concatenate the binary digits of each value with no zero padding.
    [1, 2] -> "110": leading zero bits of every value are lost.
    """
    return ''.join(format(int(b), 'b') for b in data)


def to_padded_binary(data: Iterable[int], width: int = BYTE_BITS) -> str:
    if width <= 0:
        raise ValueError(f"Bit width must be positive, got {width}")
    return ''.join(format(int(b), f'0{width}b') for b in data)


def render_input(text: str, mode) -> str:
    """Render display text as a bit string according to an OutputMode (or its int value)."""
    try:
        mode = OutputMode(mode)
    except ValueError:
        raise ValueError(f"Unknown output mode: {mode}") from None

    if mode is OutputMode.RAW_BINARY:
        return to_binary_string(encode_text(text))
    if mode in (OutputMode.CHAR_BITS, OutputMode.ALPHA_BITS):
        return to_padded_binary((ord(c) for c in text_to_chars(text)), CHAR_BITS)
    return to_padded_binary(encode_text(text), BYTE_BITS)


def signal_to_string(signal) -> str:
    """Concatenate signal values as decimals, row-major, with no separator."""
    return ''.join(str(int(v)) for v in np.asarray(signal).ravel())


def signal_to_pcm(signal, peak: float = 0.9) -> np.ndarray:
    """Scale a composite signal to int16 samples with its largest chip at `peak` full scale."""
    samples = np.asarray(signal, dtype=np.float64).ravel()
    max_val = np.max(np.abs(samples)) if samples.size else 0.0
    if max_val > 0:
        samples = samples / max_val * peak
    return (samples * 32767).astype(np.int16)

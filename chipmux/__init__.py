"""
ChipMux core library package.

Chip-code spreading and combining: a bit string is split across the rows
of a small code book, each bit is spread into a signed copy of its row's
code, and the rows are superposed into one composite integer signal.

Modules:
- codes: code book, default chip codes, code sources
- core.bitvector: bit string -> (K, B) bit grid
- core.spreader: (K, B) bits -> (K, B*K) chips
- core.combiner: chips -> composite signal, multiplex(), SpreadingContext
- utils.formats: text/byte/bit-string conversions and signal rendering
- utils.input_io: text field or file input
"""
from chipmux.codes import (
    CodeBook, ChipCode, FixedCodes, RandomCodes,
    UnsupportedCodeSourceError, codebook,
)
from chipmux.core.bitvector import build
from chipmux.core.spreader import spread
from chipmux.core.combiner import (
    SpreadingContext, combine, multiplex, perform_multiplexing, perform_output,
)

__all__ = [
    "CodeBook", "ChipCode", "FixedCodes", "RandomCodes",
    "UnsupportedCodeSourceError", "codebook", "build", "spread", "combine",
    "multiplex", "SpreadingContext", "perform_multiplexing", "perform_output",
]

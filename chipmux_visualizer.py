import os
import sys

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from chipmux.core.bitvector import build
from chipmux.core.spreader import spread
from chipmux.core.combiner import SpreadingContext, combine

OUTPUT_FILE = 'data/chipmux_pipeline.png'


def plot_pipeline(bits, path=OUTPUT_FILE, context=None):
    """Plot bit grid, spread rows and composite signal for one bit string."""
    context = context or SpreadingContext()
    book = context.book
    bit_grid = build(bits, book.spread_width)
    chips = spread(bit_grid, book)
    composite = combine(chips, book)

    num_rows = max(book.spread_width, 1)
    fig, axes = plt.subplots(num_rows + 2, 1, figsize=(12, 2.2 * (num_rows + 2)), sharex=False)
    fig.suptitle(f"Chip Multiplexing: '{bits}'", fontsize=14)

    # 1. Bit grid
    axes[0].imshow(bit_grid if bit_grid.size else np.zeros((num_rows, 1)),
                   aspect='auto', cmap='Greys', interpolation='nearest')
    axes[0].set_title(f"Bit Grid {bit_grid.shape}")
    axes[0].set_ylabel("Row")

    # 2. Spread rows
    for i in range(book.spread_width):
        ax = axes[1 + i]
        ax.step(np.arange(chips.shape[1]), chips[i], where='mid', color='tab:blue')
        ax.axhline(0, color='k', alpha=0.3)
        ax.set_title(f"Spread Row {i} (code {book.codes[i].tolist()})")
        ax.set_ylabel("Chip")
        ax.grid(True, alpha=0.3)

    # 3. Composite
    ax = axes[-1]
    if composite.size:
        ax.stem(np.arange(composite.size), composite)
    ax.set_title("Composite Signal")
    ax.set_xlabel("Chip Index")
    ax.set_ylabel("Value")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(path)
    plt.close(fig)
    return path


if __name__ == "__main__":
    bits = sys.argv[1] if len(sys.argv) > 1 else "11010010"
    saved = plot_pipeline(bits)
    print(f"Pipeline plot saved to {saved}")

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from chipmux_visualizer import plot_pipeline
from chipmux.codes import FixedCodes
from chipmux.core.combiner import SpreadingContext


def test_plot_pipeline_writes_png(tmp_path):
    path = tmp_path / "plots" / "pipeline.png"
    assert plot_pipeline("11010010", str(path)) == str(path)
    assert path.exists() and path.stat().st_size > 0


def test_plot_pipeline_with_custom_book(tmp_path):
    context = SpreadingContext(source=FixedCodes(codes=((1, 1, 1), (1, -1, 1), (1, 1, -1))))
    path = tmp_path / "three_rows.png"
    plot_pipeline("101010", str(path), context)
    assert path.exists()

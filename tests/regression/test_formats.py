import os
import sys

import numpy as np
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from chipmux.utils.formats import (
    OutputMode, encode_text, render_input, signal_to_pcm, signal_to_string,
    text_to_chars, to_binary_string, to_padded_binary,
)
from chipmux.utils.input_io import DEFAULT_INPUT_FILE, load_input, read_input


def test_binary_string_drops_leading_zeros():
    assert to_binary_string(bytes([0b00000001, 0b00000010])) == "110"


def test_padded_binary():
    assert to_padded_binary([1, 2]) == "0000000100000010"
    assert to_padded_binary([5], width=4) == "0101"
    with pytest.raises(ValueError):
        to_padded_binary([1], width=0)


def test_encode_text_is_utf16_le():
    assert encode_text("A") == b"A\x00"
    assert text_to_chars("ab") == ['a', 'b']


def test_render_input_modes():
    assert render_input("A", OutputMode.RAW_BINARY) == "10000010"
    assert render_input("A", OutputMode.CHAR_BITS) == "0000000001000001"
    assert render_input("A", 2) == render_input("A", 1)
    assert render_input("A", 3) == "0100000100000000"


def test_render_input_unknown_mode():
    with pytest.raises(ValueError):
        render_input("A", 9)


def test_signal_to_string_concatenates_rows():
    assert signal_to_string(np.array([0, -2, 4, 10])) == "0-2410"
    assert signal_to_string(np.array([[1, 2], [3, 4]])) == "1234"
    assert signal_to_string(np.zeros(0)) == ""


def test_signal_to_pcm_scales_to_peak():
    pcm = signal_to_pcm([0, -2, 4])
    assert pcm.dtype == np.int16
    assert pcm[2] == int(0.9 * 32767)
    assert pcm[0] == 0
    assert signal_to_pcm([]).size == 0
    np.testing.assert_array_equal(signal_to_pcm([0, 0]), [0, 0])


def test_read_input_creates_missing_file(tmp_path):
    path = tmp_path / "input.txt"
    assert read_input("1101", [str(path)]) == "1101"
    assert path.read_text(encoding='utf-8') == "1101"
    # Existing file wins over the supplied text
    assert read_input("0000", [str(path)]) == "1101"


def test_read_input_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert read_input("10") == "10"
    assert (tmp_path / DEFAULT_INPUT_FILE).exists()


def test_load_input_without_file():
    assert load_input("0110", False) == "0110"

import os
import sys

import numpy as np
from scipy.io import wavfile

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
sys.path.append(ROOT)
sys.path.append(os.path.join(ROOT, 'apps'))

from run_mux import config_from_args, main, parse_args, resolve_bits
from chipmux.utils.formats import OutputMode


def test_main_prints_composite(capsys):
    assert main(['1101']) == 0
    assert capsys.readouterr().out.strip() == "0040"


def test_main_random_codes_fail(capsys):
    assert main(['1101', '--random']) == 2
    assert "not implemented" in capsys.readouterr().err


def test_text_rendered_with_mode():
    args = parse_args(['--text', 'A', '--mode', '3'])
    config = config_from_args(args)
    assert config.output_mode is OutputMode.BYTE_BITS
    assert resolve_bits(config, args.bits, args.text) == "0100000100000000"


def test_file_input_is_created_and_read(tmp_path):
    path = tmp_path / "bits.txt"
    args = parse_args(['--file', str(path), '--text', '1111\n'])
    config = config_from_args(args)
    assert resolve_bits(config, args.bits, args.text) == "1111"
    assert path.exists()


def test_wav_export(tmp_path, capsys):
    path = tmp_path / "mux.wav"
    assert main(['1111', '--wav', str(path), '--samples-per-chip', '2', '--sample-rate', '1000']) == 0
    rate, samples = wavfile.read(str(path))
    assert rate == 1000
    assert samples.dtype == np.int16
    # Composite [2, 2, 4, 0], two samples per chip
    assert len(samples) == 8
    assert samples[4] == samples[5] == samples.max()
    assert samples[6] == 0

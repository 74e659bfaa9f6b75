#!/usr/bin/env python3
"""
Chip Multiplexer Runner

Spreads a bit string over the default chip code book and prints the
composite signal as concatenated decimals.

Usage:
    python3 apps/run_mux.py 1101
    python3 apps/run_mux.py --text "Hi" --mode 3
    python3 apps/run_mux.py --file input.txt --mode 0 --wav data/mux.wav --plot data/mux.png
"""

import os
import sys
import logging
import argparse

import numpy as np
from scipy.io import wavfile

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from chipmux.codes import UnsupportedCodeSourceError
from chipmux.config import MuxConfig, SAMPLE_RATE, SAMPLES_PER_CHIP
from chipmux.core.combiner import SpreadingContext, multiplex
from chipmux.utils.formats import OutputMode, render_input, signal_to_pcm, signal_to_string
from chipmux.utils.input_io import load_input

logger = logging.getLogger("ChipMux")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Chip-code spreading multiplexer")
    parser.add_argument('bits', nargs='?', default='',
                        help="Bit string to multiplex (ignored with --text/--file)")
    parser.add_argument('--text', default=None,
                        help="Display text to render into bits with --mode")
    parser.add_argument('--file', default=None,
                        help="Read input from this file (created from --text if missing)")
    parser.add_argument('--mode', type=int, default=None, choices=[m.value for m in OutputMode],
                        help="Render input text to bits: 0=raw binary, 1/2=16-bit chars, 3=8-bit bytes")
    parser.add_argument('--random', action='store_true',
                        help="Request random chip codes (not implemented)")
    parser.add_argument('--wav', default=None, help="Write the composite signal as a 16-bit WAV")
    parser.add_argument('--sample-rate', type=int, default=SAMPLE_RATE)
    parser.add_argument('--samples-per-chip', type=int, default=SAMPLES_PER_CHIP)
    parser.add_argument('--plot', default=None, help="Save a pipeline plot to this path")
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser.parse_args(argv)


def config_from_args(args) -> MuxConfig:
    return MuxConfig(
        output_mode=OutputMode(args.mode) if args.mode is not None else None,
        input_file=args.file,
        wav_path=args.wav,
        sample_rate=args.sample_rate,
        samples_per_chip=args.samples_per_chip,
        plot_path=args.plot,
        use_random_codes=args.random,
    )


def resolve_bits(config: MuxConfig, bits: str, text=None) -> str:
    """Turn CLI input into the bit string handed to the multiplexer."""
    if config.input_file:
        data = load_input(text or '', True, [config.input_file])
    elif text is not None:
        data = text
    else:
        data = bits
    if config.output_mode is not None:
        return render_input(data, config.output_mode)
    return data.strip()


def write_wav(path: str, signal, config: MuxConfig):
    samples = np.repeat(signal_to_pcm(signal), config.samples_per_chip)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    wavfile.write(path, config.sample_rate, samples)
    logger.info(f"Saved {len(samples)} samples to {path}")


def run(config: MuxConfig, bits: str) -> str:
    context = SpreadingContext(source=config.source)
    signal = multiplex(bits, config.use_random_codes, context)
    logger.info(f"Code book {context.codes.tolist()} -> {signal.size} chips")

    if config.wav_path:
        write_wav(config.wav_path, signal, config)
    if config.plot_path:
        from chipmux_visualizer import plot_pipeline
        plot_pipeline(bits, config.plot_path, context)
        logger.info(f"Saved plot to {config.plot_path}")
    return signal_to_string(signal)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s [%(levelname)s] %(message)s')
    config = config_from_args(args)
    bits = resolve_bits(config, args.bits, args.text)

    try:
        output = run(config, bits)
    except UnsupportedCodeSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

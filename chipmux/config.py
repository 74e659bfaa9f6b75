from dataclasses import dataclass, field
from typing import Optional

from chipmux.codes import FixedCodes
from chipmux.utils.formats import OutputMode

SAMPLE_RATE = 8000      # Hz, used only for WAV export
SAMPLES_PER_CHIP = 8    # Each chip is held for this many samples in the WAV


@dataclass
class MuxConfig:
    source: FixedCodes = field(default_factory=FixedCodes)
    output_mode: Optional[OutputMode] = None  # None: input is already a bit string
    input_file: Optional[str] = None
    wav_path: Optional[str] = None
    sample_rate: int = SAMPLE_RATE
    samples_per_chip: int = SAMPLES_PER_CHIP
    plot_path: Optional[str] = None
    use_random_codes: bool = False

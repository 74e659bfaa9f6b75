import logging
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger("ChipMux")

DEFAULT_INPUT_FILE = "tmpInput.bin"


def read_input(text: str, files: Optional[Sequence[str]] = None) -> str:
    """
    Read input from the first file in `files` (or DEFAULT_INPUT_FILE).
    A missing file is first created holding `text`.
    """
    path = Path(files[0]) if files else Path(DEFAULT_INPUT_FILE)
    if not path.exists():
        logger.info(f"Input file {path} not found; writing current text to it")
        path.write_text(text, encoding='utf-8')
    return path.read_text(encoding='utf-8')


def load_input(text: str, is_file: bool = False, files: Optional[Sequence[str]] = None) -> str:
    return read_input(text, files) if is_file else text

"""
Sample Commands
===============

Default ZPL command shown in the print forms and sent by the CLI samples.
"""

from pathlib import Path
from typing import Optional

from ..config import SAMPLE_FILE


def load_sample_command(path: Optional[str] = None) -> str:
    """
    Read a sample command file.

    Lines are re-joined with CRLF, which is what the printer line
    protocol expects regardless of how the file was checked out.

    Args:
        path: Command file (defaults to the packaged shipping label)

    Returns:
        Command text
    """
    sample_path = Path(path or SAMPLE_FILE)
    with open(sample_path, 'r', encoding='utf-8') as f:
        return ''.join(line.rstrip('\r\n') + '\r\n' for line in f)

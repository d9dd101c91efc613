"""
Dump file output for SQL Dumper.
"""

import gzip
import logging
from pathlib import Path
from typing import Optional, TextIO


def build_output_path(
    output_dir: Path,
    database: str,
    timestamp: Optional[str] = None,
    compress: bool = False
) -> Path:
    """Build the dump file path for a database."""
    stem = f"{database}_{timestamp}" if timestamp else database
    suffix = '.sql.gz' if compress else '.sql'
    return output_dir / f"{stem}{suffix}"


def open_output_file(output_path: Path, compress: bool = False) -> TextIO:
    """Open output file with optional compression.

    Undecodable bytes read from the server are kept as surrogates and
    written back out unchanged.
    """
    if compress:
        return gzip.open(output_path, 'wt', encoding='utf-8', errors='surrogateescape')
    return open(output_path, 'w', encoding='utf-8', errors='surrogateescape')


def write_dump(text: str, output_path: Path, compress: bool = False) -> Path:
    """Write rendered dump text to a file, creating its directory."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open_output_file(output_path, compress) as file_handle:
        file_handle.write(text)
    logging.debug(f"Wrote {len(text)} characters to {output_path}")
    return output_path

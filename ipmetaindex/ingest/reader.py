"""Header-driven streaming over vendor CSV tables.

Column order is taken from each file's header line, never from a fixed schema,
so vendors may add or reorder columns without breaking the build.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from ..errors import IoFailure
from .splitter import split_column_values

logger = logging.getLogger(__name__)


def iter_columns(
    path: Path,
    columns: Sequence[str],
    *,
    progress: bool = False,
) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, values)`` for every data row of ``path``.

    ``values`` holds one entry per requested column, in the order of
    ``columns``; a column absent from the header or from a short row reads as
    an empty string. Blank lines are skipped.

    Args:
        path: CSV file with a header row
        columns: Column names to extract
        progress: Show a tqdm progress bar while streaming

    Raises:
        IoFailure: The file cannot be opened or read, or has no header line
    """
    try:
        handle = open(path, encoding="utf-8-sig", newline="")
    except OSError as e:
        logger.error(f"Cannot open {path}: {e}")
        raise IoFailure(f"cannot read {path.name}") from e

    with handle:
        try:
            header_line = handle.readline()
            if not header_line.strip():
                raise IoFailure(f"empty CSV file {path.name}")

            header = [name.strip() for name in split_column_values(header_line.rstrip("\r\n"))]
            positions = {name: index for index, name in enumerate(header)}
            wanted: List[Optional[int]] = [positions.get(name) for name in columns]
            missing = [name for name, index in zip(columns, wanted) if index is None]
            if missing:
                logger.warning(f"{path.name}: header has no column(s) {', '.join(missing)}")

            rows = tqdm(handle, desc=path.name, unit=" rows", disable=not progress)
            for line_number, line in enumerate(rows, start=2):
                line = line.rstrip("\r\n")
                if not line:
                    continue
                values = split_column_values(line)
                yield line_number, [
                    values[index] if index is not None and index < len(values) else "" for index in wanted
                ]
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed reading {path}: {e}")
            raise IoFailure(f"cannot read {path.name}") from e


__all__ = ["iter_columns"]

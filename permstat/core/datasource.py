"""
Sample loading for PermStat.

A sample file holds one number per line. Blank lines are skipped.
Everything else must parse as a float; the first line that does not
raises SampleLoadError naming the file and line.

Usage:
    from permstat.core.datasource import load_sample

    control = load_sample("control.dat")
    treatment = load_sample("treatment.dat")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray

from permstat.core.exceptions import SampleLoadError


def load_sample(path: str | Path) -> NDArray[np.floating[Any]]:
    """
    Read a one-number-per-line text file into a float64 array.

    Args:
        path: File to read

    Returns:
        1D float64 array in file order

    Raises:
        SampleLoadError: If the file cannot be read or a line fails to parse
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise SampleLoadError(
            f"{path}: unable to read sample file: {e}", path=str(path)
        ) from e

    values: list[float] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            values.append(float(stripped))
        except ValueError as e:
            raise SampleLoadError(
                f"{path}:{line_number}: unable to parse {stripped!r} as a number",
                path=str(path),
                line_number=line_number,
            ) from e

    return np.asarray(values, dtype=np.float64)

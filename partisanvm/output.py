"""Writing simulation and solver results into nested result folders."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path

_SUFFIX = ".txt"
_SEPARATOR = ", "


def result_directory(base: str | PathLike[str], folder_names: Sequence[str]) -> Path:
    """Return ``base/folder_names...``, creating it if it does not exist."""
    directory = Path(base).joinpath(*folder_names)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _target(base: str | PathLike[str], folder_names: Sequence[str], name: str) -> Path:
    if not name or "/" in name or "\\" in name:
        raise ValueError(f"invalid result file name: {name!r}")
    return result_directory(base, folder_names) / f"{name}{_SUFFIX}"


def _format(value: float) -> str:
    return repr(float(value))


def write_single_vector(
    values: Iterable[float],
    base: str | PathLike[str],
    folder_names: Sequence[str],
    name: str,
) -> Path:
    """Write one value per line and return the path of the written file."""
    path = _target(base, folder_names, name)
    with path.open("w", encoding="utf-8") as handle:
        for value in values:
            handle.write(_format(value) + "\n")
    return path


def write_rows(
    rows: Iterable[Iterable[float]],
    base: str | PathLike[str],
    folder_names: Sequence[str],
    name: str,
) -> Path:
    """Write each row on its own line, values separated by commas."""
    path = _target(base, folder_names, name)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(_SEPARATOR.join(_format(value) for value in row) + "\n")
    return path
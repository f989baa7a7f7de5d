"""Structured document encoding for :class:`Grid` objects.

A grid document is a plain mapping::

    {"rows": 2, "columns": 3, "cells": [1, 2, 3, 4, 5, 6]}

where ``cells`` holds the values in row-major order. Encoding is only
possible when every cell supports structured serialization: JSON primitives,
lists and dicts of them, or objects providing ``to_dict()``. A custom
``encode_value`` / ``decode_value`` pair can be supplied for other types.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from gridkit.src.core.errors import GridEncodingError, InvalidDimensions
from gridkit.src.core.grid import Grid
from gridkit.src.utils import config_loader
from gridkit.src.utils.logger import get_logger

logger = get_logger(__name__)

_PRIMITIVES = (type(None), bool, int, float, str)


def supports_structured(value: Any) -> bool:
    """Return ``True`` if ``value`` can be placed in a grid document as is."""
    if isinstance(value, _PRIMITIVES):
        return True
    if isinstance(value, (list, tuple)):
        return all(supports_structured(v) for v in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and supports_structured(v) for k, v in value.items())
    return callable(getattr(value, "to_dict", None))


def _default_encode(value: Any) -> Any:
    if isinstance(value, _PRIMITIVES):
        return value
    if isinstance(value, (list, tuple)):
        return [_default_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _default_encode(v) for k, v in value.items()}
    return value.to_dict()


def encode_grid(grid: Grid, encode_value: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
    """Return a structured document describing ``grid``."""
    cells = []
    for r, c in grid.coords():
        value = grid.get(r, c)
        if encode_value is not None:
            value = encode_value(value)
        if not supports_structured(value):
            raise GridEncodingError(
                f"Cell ({r}, {c}) of type {type(value).__name__} does not support structured encoding"
            )
        cells.append(_default_encode(value))
    return {"rows": grid.rows, "columns": grid.columns, "cells": cells}


def decode_grid(document: Dict[str, Any], decode_value: Optional[Callable[[Any], Any]] = None) -> Grid:
    """Rebuild a :class:`Grid` from a document produced by :func:`encode_grid`."""
    if not isinstance(document, dict):
        raise GridEncodingError("Grid document must be a mapping")
    missing = {"rows", "columns", "cells"} - set(document)
    if missing:
        logger.warning("Rejected grid document missing keys: %s", sorted(missing))
        raise GridEncodingError(f"Grid document missing keys: {sorted(missing)}")

    rows, columns, cells = document["rows"], document["columns"], document["cells"]
    if any(not isinstance(n, int) or isinstance(n, bool) for n in (rows, columns)):
        raise GridEncodingError("Grid document dimensions must be integers")
    if rows < 0 or columns < 0:
        raise InvalidDimensions(f"Grid dimensions must be non-negative, got {rows}x{columns}")
    if not isinstance(cells, list) or len(cells) != rows * columns:
        logger.warning("Rejected grid document: %sx%s with bad cell list", rows, columns)
        raise GridEncodingError(f"Expected {rows * columns} cells for a {rows}x{columns} grid")

    if decode_value is not None:
        cells = [decode_value(v) for v in cells]
    grid = Grid.filled(rows, columns, None)
    for index, value in enumerate(cells):
        grid.set(index // columns, index % columns, value)
    return grid


def _format_for(path: Path) -> str:
    if path.suffix in {".yaml", ".yml"}:
        return "yaml"
    if path.suffix == ".json":
        return "json"
    if not path.suffix:
        return config_loader.DEFAULT_CODEC_FORMAT
    raise ValueError(f"Unsupported grid document format: {path.suffix}")


def dump_grid(grid: Grid, path: str | Path, encode_value: Optional[Callable[[Any], Any]] = None) -> None:
    """Write ``grid`` to ``path`` as JSON or YAML depending on the suffix."""
    path = Path(path)
    fmt = _format_for(path)
    document = encode_grid(grid, encode_value)
    with open(path, "w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(document, f, sort_keys=False)
        else:
            json.dump(document, f)
    logger.debug("Wrote %sx%s grid to %s", grid.rows, grid.columns, path)


def load_grid(path: str | Path, decode_value: Optional[Callable[[Any], Any]] = None) -> Grid:
    """Read a grid document written by :func:`dump_grid`."""
    path = Path(path)
    fmt = _format_for(path)
    with open(path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f) if fmt == "yaml" else json.load(f)
    return decode_grid(document, decode_value)


__all__ = [
    "supports_structured",
    "encode_grid",
    "decode_grid",
    "dump_grid",
    "load_grid",
]

"""YAML loader + schema validation for grid documents.

A grid document is either a bare list of rows::

    - [1, 2, 3]
    - [4, 5, 6]

or a mapping that may also name the labels to connect::

    grid:
      - [1, 2, 3]
      - [4, 5, 6]
    start: 1
    end: 6

JSON is accepted too since it parses as YAML.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema
import yaml

from gridpaths.grid import duplicate_labels, grid_shape
from gridpaths.logging import get_logger

logger = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("gridpaths.schemas")
        .joinpath("grid.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft-07 treats 1.0 as an integer; labels must be real ints
_GridValidator = jsonschema.validators.extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine(
        "integer", _strict_integer
    ),
)


def load_grid_document(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a grid document.

    Returns:
        A mapping with key ``grid`` (list of rows) and optional integer keys
        ``start`` and ``end``.

    Raises:
        ValueError: If the document is empty, has the wrong top-level shape, or
            the grid is not rectangular.
        jsonschema.ValidationError: If the document violates the grid schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise ValueError("Grid document is empty.")
    if isinstance(data, list):
        data = {"grid": data}
    if not isinstance(data, dict):
        raise ValueError(
            "The provided YAML must be a list of rows or a mapping with a 'grid' key."
        )

    _GridValidator(_load_schema()).validate(data)

    rows, cols = grid_shape(data["grid"])
    logger.debug("Loaded %dx%d grid", rows, cols)

    dupes = duplicate_labels(data["grid"])
    if dupes:
        logger.warning(
            "Grid has repeated labels %s; the first row-major occurrence is used",
            sorted(dupes),
        )

    return data


def load_grid_yaml(yaml_str: str) -> List[List[int]]:
    """Return only the validated grid rows from a grid document."""
    return load_grid_document(yaml_str)["grid"]


def load_grid_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a grid document from disk and validate it.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    text = Path(path).read_text(encoding="utf-8")
    return load_grid_document(text)

# inout/yaml_parser.py
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np
import scipy.sparse as sp
import yaml
from cerberus import Validator

from core.exceptions import MatrixLoadError
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Schema for a YAML matrix file.
MATRIX_SCHEMA: Dict[str, Any] = {
    'matrix': {
        'type': 'list',
        'required': True,
        'empty': False,
        'schema': {
            'type': 'list',
            'schema': {'type': 'number'},
        },
    },
    # Keyword arguments forwarded verbatim to the inverter.
    'options': {
        'type': 'dict',
        'required': False,
        'default': {},
    },
    'sparse': {
        'type': 'boolean',
        'required': False,
        'default': False,
    },
}

def _parse_yaml(path: Path) -> Tuple[Any, Dict[str, Any]]:
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MatrixLoadError(f"Invalid YAML in '{path}': {e}") from e

    if not isinstance(data, dict):
        raise MatrixLoadError(f"Matrix file '{path}' must contain a mapping with a 'matrix' key.")
    validator = Validator(MATRIX_SCHEMA)
    if not validator.validate(data):
        raise MatrixLoadError(f"Matrix file '{path}' failed validation: {validator.errors}")
    doc = validator.document

    try:
        matrix = np.array(doc['matrix'], dtype=float)
    except ValueError as e:                       # ragged rows
        raise MatrixLoadError(f"Matrix rows in '{path}' have unequal lengths: {e}") from e
    if doc['sparse']:
        matrix = sp.csc_matrix(matrix)
    return matrix, dict(doc['options'])

def parse_matrix_file(path: str, delimiter: Optional[str] = None) -> Tuple[Any, Dict[str, Any]]:
    """
    Load a subject matrix from disk.

    Supported formats:
      * ``.yml`` / ``.yaml`` -- ``matrix`` (list of rows) plus optional
        ``options`` and ``sparse`` keys, validated against MATRIX_SCHEMA.
      * ``.npy`` -- a NumPy array file.
      * anything else -- plain text read with ``numpy.loadtxt``.

    Returns:
        (matrix, options) where ``options`` are inverter keyword arguments
        (always empty for non-YAML input).

    Raises:
        MatrixLoadError: if the file is missing, malformed, or not 2D.
    """
    p = Path(path)
    if not p.is_file():
        raise MatrixLoadError(f"Matrix file '{path}' does not exist.")

    suffix = p.suffix.lower()
    options: Dict[str, Any] = {}
    try:
        if suffix in ('.yml', '.yaml'):
            matrix, options = _parse_yaml(p)
        elif suffix == '.npy':
            matrix = np.load(p, allow_pickle=False)
        else:
            matrix = np.loadtxt(p, delimiter=delimiter, ndmin=2)
    except (OSError, ValueError) as e:
        raise MatrixLoadError(f"Could not read matrix from '{path}': {e}") from e

    if matrix.ndim != 2:
        raise MatrixLoadError(f"Expected a 2D matrix in '{path}', got {matrix.ndim} dimension(s).")
    logger.debug("Loaded %s matrix of shape %s from %s", type(matrix).__name__, matrix.shape, path)
    return matrix, options

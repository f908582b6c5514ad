#!/usr/bin/env python
import argparse
import logging
import sys

import numpy as np
import scipy.sparse as sp

from utils.logging_config import setup_logging, get_logger
from utils.matrix import is_inverse
from inout.yaml_parser import parse_matrix_file
from core.cache_matrix import make_cache_matrix
from core.solver import cache_solve
from core.exceptions import CacheMatrixError

logger = get_logger(__name__)

def main(argv=None) -> int:
    """
    Load a matrix, invert it through a CacheMatrix and print the inverse.

    Command-line arguments:
      --matrix: Path to the matrix file (.yml/.yaml, .npy or plain text).
      --repeat: Number of solve calls; every call after the first is a cache hit.
      --delimiter: Column delimiter for plain-text input.
      --check: Log whether the result actually inverts the matrix.
      --dump: Optional path to save the inverse (numpy .npy).
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Compute a matrix inverse through a memoizing cache.")
    parser.add_argument("--matrix", required=True, help="Path to the matrix file.")
    parser.add_argument("--repeat", type=int, default=2, help="Number of solve calls (default: 2).")
    parser.add_argument("--delimiter", default=None, help="Column delimiter for plain-text input.")
    parser.add_argument("--check", action="store_true", help="Verify that the result inverts the matrix.")
    parser.add_argument("--dump", help="Path to save the inverse (e.g., inverse.npy)", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG)
        logger.debug("Verbose logging enabled.")
    else:
        setup_logging(level=logging.INFO)

    if args.repeat < 1:
        parser.error("--repeat must be at least 1")

    try:
        matrix, options = parse_matrix_file(args.matrix, delimiter=args.delimiter)
    except CacheMatrixError as e:
        logger.error("Could not load matrix: %s", e)
        return 1

    cache = make_cache_matrix(matrix)
    try:
        for _ in range(args.repeat):
            inverse = cache_solve(cache, **options)
    except (np.linalg.LinAlgError, ValueError, TypeError) as e:   # TypeError: unknown inverter options
        logger.error("Matrix inversion failed: %s", e)
        return 1

    if args.check:
        if is_inverse(matrix, inverse):
            logger.info("Inverse check passed.")
        else:
            logger.warning("Inverse check failed: matrix @ inverse is not the identity.")

    dense = inverse.toarray() if sp.issparse(inverse) else np.asarray(inverse)
    if args.dump:
        np.save(args.dump, dense)
        print(f"Inverse dumped to {args.dump}")

    print(np.array2string(dense, precision=6, suppress_small=True))
    return 0

if __name__ == "__main__":
    sys.exit(main())

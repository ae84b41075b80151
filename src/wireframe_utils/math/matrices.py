"""Define utility functions for multiplying small dense matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


def matrix_multiply(
    a: NDArray[np.float64] | Sequence[Sequence[float]],
    b: NDArray[np.float64] | Sequence[Sequence[float]],
) -> NDArray[np.float64]:
    """Compute the product of two rectangular matrices.

    The inner dimensions must agree (columns of `a` equal rows of `b`); this is left to
    the caller, and NumPy raises its own ValueError when they do not.

    :param a: Left-hand matrix of shape (N, K)
    :param b: Right-hand matrix of shape (K, M)
    :return: Product matrix of shape (N, M)
    """
    return np.asarray(a, dtype=np.float64) @ np.asarray(b, dtype=np.float64)

"""
Ridge regression solver using the regularized normal equation

    beta = (X^T X + lambda I)^(-1) X^T y

No intercept column is added: the eye features carry their own offset and the
engine dots the coefficients directly with the current feature vector.
"""

from typing import Sequence

import numpy as np

from gazetrail.exceptions import RegressionFailure


def ridge(
    targets: Sequence[float],
    design_matrix: Sequence[Sequence[float]],
    ridge_parameter: float
) -> np.ndarray:
    """
    Solve one axis of the ridge regression

    Args:
        targets: Target values, one per row of design_matrix
        design_matrix: Feature rows of shape (n_samples, n_features)
        ridge_parameter: L2 regularization strength (lambda)

    Returns:
        Coefficients of shape (n_features,)

    Raises:
        RegressionFailure: On empty or inconsistent input or a singular system
    """
    try:
        X = np.asarray(design_matrix, dtype=np.float64)
        y = np.asarray(targets, dtype=np.float64)
    except ValueError as exc:
        # Ragged rows (feature vectors of different lengths)
        raise RegressionFailure(f"Design matrix is not rectangular: {exc}") from exc

    if X.ndim != 2 or X.shape[0] == 0 or X.shape[1] == 0:
        raise RegressionFailure(f"Design matrix must be a non-empty 2D array, got shape {X.shape}")
    if y.ndim != 1 or y.shape[0] != X.shape[0]:
        raise RegressionFailure(
            f"Expected {X.shape[0]} targets, got shape {y.shape}"
        )
    if not (np.all(np.isfinite(X)) and np.all(np.isfinite(y))):
        raise RegressionFailure("Training data contains non-finite values")

    n_features = X.shape[1]

    # Ridge regularization: (X^T X + lambda I)
    XTX_reg = X.T @ X + ridge_parameter * np.eye(n_features)
    XTy = X.T @ y

    try:
        coefficients = np.linalg.solve(XTX_reg, XTy)
    except np.linalg.LinAlgError as exc:
        raise RegressionFailure(f"Ridge system is singular: {exc}") from exc

    if not np.all(np.isfinite(coefficients)):
        raise RegressionFailure("Ridge solution is not finite")

    return coefficients

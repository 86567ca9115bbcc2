"""
Tests for the smoothing filters
"""

import numpy as np
from gazetrail.filters.kalman import KalmanFilter, IdentityFilter, build_smoothing_filter


def test_kalman_filter_initialization():
    """Test Kalman filter initialization"""
    kf = KalmanFilter()
    np.testing.assert_allclose(kf.state, [500.0, 500.0, 0.0, 0.0])
    np.testing.assert_allclose(kf.covariance, np.eye(4) * 0.0001)
    np.testing.assert_allclose(kf.R, np.eye(2) * 47.0)


def test_kalman_filter_prediction():
    """Test Kalman filter prediction"""
    kf = KalmanFilter()
    prediction = kf.predict()
    assert len(prediction) == 2
    assert isinstance(prediction, np.ndarray)


def test_kalman_filter_update():
    """Test Kalman filter update moves toward the observation"""
    kf = KalmanFilter()
    filtered = kf.update([800.0, 300.0])
    assert isinstance(filtered, np.ndarray)
    assert 500.0 < filtered[0] < 800.0
    assert 300.0 < filtered[1] < 500.0


def test_kalman_filter_converges():
    """Test convergence on a constant observation"""
    kf = KalmanFilter()
    for _ in range(1000):
        filtered = kf.update([800.0, 300.0])
    np.testing.assert_allclose(filtered, [800.0, 300.0], atol=1.0)


def test_kalman_filter_deterministic():
    """Test identical outputs for identical input sequences"""
    observations = [[100.0, 200.0], [110.0, 190.0], [130.0, 205.0], [90.0, 210.0]]
    a, b = KalmanFilter(), KalmanFilter()
    for obs in observations:
        np.testing.assert_array_equal(a.update(obs), b.update(obs))


def test_kalman_filter_reset():
    """Test reset restores the initial state"""
    kf = KalmanFilter()
    first = kf.update([800.0, 300.0])
    kf.update([900.0, 100.0])
    kf.reset()
    np.testing.assert_array_equal(kf.update([800.0, 300.0]), first)


def test_identity_filter():
    """Test pass-through smoothing"""
    identity = IdentityFilter()
    np.testing.assert_array_equal(identity.update([3, -1]), [3.0, -1.0])


def test_build_smoothing_filter():
    """Test filter selection by flag"""
    assert isinstance(build_smoothing_filter(True), KalmanFilter)
    assert isinstance(build_smoothing_filter(False), IdentityFilter)
    assert build_smoothing_filter(True, pixel_error=10.0).pixel_error == 10.0

"""
Tests for eye patch feature extraction
"""

import numpy as np
import pytest
from gazetrail.features.eye_features import get_eye_features


@pytest.fixture
def eyes():
    rng = np.random.default_rng(0)
    return {
        'left': {'patch': rng.integers(0, 256, size=(24, 40, 3), dtype=np.uint8), 'blink': False},
        'right': {'patch': rng.integers(0, 256, size=(24, 40, 3), dtype=np.uint8), 'blink': False},
    }


def test_feature_vector_shape(eyes):
    """Test 10x6 thumbnails for both eyes"""
    features = get_eye_features(eyes)
    assert features.shape == (120,)
    assert features.dtype == np.float64
    assert features.min() >= 0
    assert features.max() <= 255


def test_custom_patch_size(eyes):
    """Test a different thumbnail size"""
    features = get_eye_features(eyes, width=4, height=3)
    assert features.shape == (24,)


def test_grayscale_and_bgra_patches(eyes):
    """Test single-channel and four-channel patches"""
    eyes['left']['patch'] = np.full((24, 40), 128, dtype=np.uint8)
    eyes['right']['patch'] = np.zeros((24, 40, 4), dtype=np.uint8)
    features = get_eye_features(eyes)
    assert features.shape == (120,)


def test_deterministic(eyes):
    """Test identical features for identical patches"""
    np.testing.assert_array_equal(get_eye_features(eyes), get_eye_features(eyes))


def test_blink_returns_none(eyes):
    """Test that a blinking eye yields no features"""
    eyes['right']['blink'] = True
    assert get_eye_features(eyes) is None


@pytest.mark.parametrize("observation", [
    None,
    {},
    {'left': {'patch': np.zeros((10, 10), dtype=np.uint8)}},
    {'left': {'patch': None}, 'right': {'patch': np.zeros((10, 10), dtype=np.uint8)}},
    {'left': {'patch': np.zeros((0, 0), dtype=np.uint8)}, 'right': {'patch': np.zeros((10, 10), dtype=np.uint8)}},
])
def test_missing_eyes_return_none(observation):
    """Test lost tracking"""
    assert get_eye_features(observation) is None

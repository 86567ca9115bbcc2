"""
Eye patch feature extraction

Each eye patch is reduced to a small grayscale thumbnail with equalized
histogram; the two thumbnails are flattened and concatenated. With the default
10x6 patch size this yields 120 features per frame.
"""

from typing import Any, Mapping, Optional

import cv2
import numpy as np

from gazetrail import constants as const


def _patch_features(patch: Any, width: int, height: int) -> Optional[np.ndarray]:
    """Grayscale, resize and equalize one eye patch"""
    if patch is None:
        return None

    image = np.asarray(patch)
    if image.size == 0 or image.ndim not in (2, 3):
        return None

    if image.ndim == 3:
        channels = image.shape[2]
        if channels == 4:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        elif channels == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        elif channels == 1:
            image = image[:, :, 0]
        else:
            return None

    # equalizeHist needs 8-bit input
    if image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)

    resized = cv2.resize(image, (width, height), interpolation=cv2.INTER_AREA)
    equalized = cv2.equalizeHist(resized)
    return equalized.astype(np.float64).ravel()


def get_eye_features(
    eyes: Optional[Mapping[str, Any]],
    width: int = const.EYE_PATCH_WIDTH,
    height: int = const.EYE_PATCH_HEIGHT
) -> Optional[np.ndarray]:
    """
    Build the feature vector for one frame

    Args:
        eyes: Mapping with 'left' and 'right' entries, each a mapping holding
            'patch' (BGR, BGRA or grayscale image) and optionally 'blink'
        width: Thumbnail width per eye
        height: Thumbnail height per eye

    Returns:
        Concatenated left/right features, or None when features cannot be
        extracted (no eyes, missing patch, blink)
    """
    if not eyes:
        return None

    left = eyes.get('left')
    right = eyes.get('right')
    if not left or not right:
        return None

    if left.get('blink') or right.get('blink'):
        return None

    left_features = _patch_features(left.get('patch'), width, height)
    right_features = _patch_features(right.get('patch'), width, height)
    if left_features is None or right_features is None:
        return None

    return np.concatenate([left_features, right_features])

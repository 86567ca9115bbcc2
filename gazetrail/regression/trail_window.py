"""
Trail window selection

Filters trailing samples down to those newer than the decay horizon.
"""

from typing import Iterable, List

from gazetrail.buffers.sample_buffer import TrailSample
from gazetrail.exceptions import ConfigurationError


def select_trail_window(
    samples: Iterable[TrailSample],
    now: float,
    decay_ms: float
) -> List[TrailSample]:
    """
    Return trail samples recorded within the last decay_ms milliseconds

    A sample qualifies iff timestamp > now - decay_ms, so a sample exactly
    decay_ms old is excluded. Relative order is preserved and the input is
    never modified.

    Args:
        samples: Trail samples, oldest first
        now: Current monotonic time (ms)
        decay_ms: Window horizon (ms, >= 0)

    Returns:
        Qualifying samples in their original order
    """
    if decay_ms < 0:
        raise ConfigurationError(f"Trail decay must be >= 0 ms, got {decay_ms}")

    cutoff = now - decay_ms
    return [sample for sample in samples if sample.timestamp > cutoff]

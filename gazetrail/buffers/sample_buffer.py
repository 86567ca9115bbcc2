"""
Bounded sample buffers

Fixed-capacity, insertion-ordered storage for calibration and trail samples.
When full, a push evicts the oldest element first.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterable, Iterator, List, Tuple, TypeVar

from gazetrail.exceptions import ConfigurationError, IndexOutOfRange


@dataclass(frozen=True)
class CalibrationSample:
    """Feature vector paired with a known screen position (from a click)"""
    features: Tuple[float, ...]
    screen_x: float
    screen_y: float


@dataclass(frozen=True)
class TrailSample:
    """Feature vector paired with an assumed screen position at a monotonic time (ms)"""
    features: Tuple[float, ...]
    screen_x: float
    screen_y: float
    timestamp: float


T = TypeVar("T")


class BoundedSampleBuffer(Generic[T]):
    """
    Ring buffer with overwrite-oldest semantics

    Index 0 is always the oldest live element. Capacity is fixed at
    construction and the size never exceeds it.
    """

    def __init__(self, capacity: int):
        """
        Initialize buffer

        Args:
            capacity: Maximum number of live elements (must be > 0)
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigurationError(f"Buffer capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._items: Deque[T] = deque(maxlen=capacity)

    def push(self, sample: T) -> None:
        """Append a sample, evicting the oldest one if the buffer is full"""
        # deque(maxlen=...) drops from the left when full
        self._items.append(sample)

    def push_all(self, samples: Iterable[T]) -> None:
        for sample in samples:
            self.push(sample)

    def get(self, index: int) -> T:
        """
        Return the element at logical position index (0 = oldest)

        Raises:
            IndexOutOfRange: If index is negative or >= size
        """
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(f"Index {index} out of range for buffer of size {len(self._items)}")
        return self._items[index]

    def size(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def to_sequence(self) -> List[T]:
        """Snapshot copy, oldest to newest"""
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_sequence())

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __repr__(self) -> str:
        return f"BoundedSampleBuffer(size={len(self._items)}, capacity={self._capacity})"

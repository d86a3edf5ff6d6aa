"""Keyed collection of change detectors, one per watched thing."""

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from change_detector.core.detector import ChangeDetector

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class DetectorRegistry(Generic[K, T]):
    """
    Lazily created detectors keyed by identity (file path, config key, ...).

    All detectors share the registry's value type and hash algorithm. Like
    ChangeDetector itself this holds no lock.
    """

    def __init__(
        self,
        value_type: type[T] | None = None,
        algorithm: str | None = None,
    ):
        self.value_type = value_type
        self.algorithm = algorithm
        self._detectors: dict[K, ChangeDetector[T]] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._detectors

    def __len__(self) -> int:
        return len(self._detectors)

    def keys(self) -> Iterator[K]:
        return iter(list(self._detectors))

    def get(self, key: K) -> ChangeDetector[T]:
        """Get the detector for a key, creating an untouched one if needed."""
        detector = self._detectors.get(key)
        if detector is None:
            detector = ChangeDetector(value_type=self.value_type, algorithm=self.algorithm)
            self._detectors[key] = detector
        return detector

    def changed(self, key: K, value: T) -> bool:
        return self.get(key).changed(value)

    def detect(self, key: K, value: T) -> T | None:
        return self.get(key).detect(value)

    def detect_owned(self, key: K, value: T) -> T | None:
        return self.get(key).detect_owned(value)

    def forget(self, key: K) -> bool:
        """
        Drop the detector for a key.

        The next value seen for that key is reported as a change.

        Returns:
            True if the key was being tracked
        """
        return self._detectors.pop(key, None) is not None

"""Hash-based change detector."""

from typing import Generic, TypeVar, get_origin

from change_detector.config.settings import get_settings
from change_detector.utils.hash import HASH_ALGORITHMS, hash_value
from change_detector.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ChangeDetector(Generic[T]):
    """
    Detect whether a value differs from the last one seen, by hash.

    Only the 64-bit hash of the last value is kept, never the value itself.
    A detector is meant for one kind of value: parameterize it
    (``ChangeDetector[str]()``) for type checkers, and pass ``value_type`` to
    also have every detection call check the value's type at runtime.

    The stored hash starts at 0, which doubles as the "untouched" marker. A
    real value hashing to 0 (about 1 in 2**64) is indistinguishable from a
    fresh detector, and would not be reported as a change on first sight.

    Not thread-safe: one detector belongs to one sequence of calls.

    Usage:
        detector = ChangeDetector[list[int]]()
        if detector.detect(rows) is not None:
            write(rows)
    """

    def __init__(
        self,
        value_type: type[T] | None = None,
        algorithm: str | None = None,
    ):
        """
        Initialize an untouched detector.

        Args:
            value_type: If given, values passed in must be instances of it
            algorithm: Hash function name (defaults to settings.hash_algorithm)

        Raises:
            ValueError: If the algorithm is unknown
        """
        if algorithm is None:
            algorithm = get_settings().hash_algorithm
        if algorithm not in HASH_ALGORITHMS:
            raise ValueError(
                f"Unknown hash algorithm {algorithm!r}, expected one of {HASH_ALGORITHMS}"
            )

        self._hash = 0
        # isinstance() needs list, not list[int]
        self._value_type = get_origin(value_type) or value_type
        self._algorithm = algorithm

    def __repr__(self) -> str:
        type_name = self._value_type.__name__ if self._value_type else "Any"
        return f"ChangeDetector[{type_name}](hash={self._hash:#018x}, algorithm={self._algorithm!r})"

    @property
    def hash(self) -> int:
        """Hash of the last value seen, or 0 if none."""
        return self._hash

    @property
    def value_type(self) -> type[T] | None:
        return self._value_type

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def untouched(self) -> bool:
        """Check whether no value has been seen yet."""
        return self._hash == 0

    def _restore(self, previous_hash: int) -> None:
        """Put back a hash saved before a detection whose follow-up failed."""
        self._hash = previous_hash

    def changed(self, value: T) -> bool:
        """
        Record a value and report whether its hash differs from the last one.

        The stored hash is replaced whether or not a change is reported.

        Args:
            value: New candidate value

        Returns:
            True if the value changed (or is the first one), False otherwise

        Raises:
            TypeError: If value is not an instance of value_type, or not hashable
        """
        if self._value_type is not None and not isinstance(value, self._value_type):
            raise TypeError(
                f"Expected {self._value_type.__name__}, got {type(value).__name__}"
            )

        new_hash = hash_value(value, self._algorithm)
        change = self._hash != new_hash
        self._hash = new_hash

        logger.debug(f"{'changed' if change else 'unchanged'}: hash={new_hash:#018x}")
        return change

    def detect(self, value: T) -> T | None:
        """
        Return the value if it changed since the last call, else None.

        The returned object is the one passed in, not a copy. For a detector
        whose values may themselves be None, use ``changed`` instead.
        """
        return value if self.changed(value) else None

    def detect_owned(self, value: T) -> T | None:
        """
        Hand a value over, getting it back only if it changed.

        Same comparison as ``detect``. On no change the detector keeps no
        reference to the value, so a caller that dropped its own reference
        lets the value be collected.
        """
        if self.changed(value):
            return value
        return None

"""Hash-based change detection: react only when a value actually changed."""

from change_detector.core import ChangeDetector, DetectorRegistry
from change_detector.utils.storage import write_if_changed

__all__ = ["ChangeDetector", "DetectorRegistry", "write_if_changed"]

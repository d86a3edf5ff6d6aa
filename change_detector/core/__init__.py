"""Core change detection components."""

from change_detector.core.detector import ChangeDetector
from change_detector.core.registry import DetectorRegistry

__all__ = ["ChangeDetector", "DetectorRegistry"]

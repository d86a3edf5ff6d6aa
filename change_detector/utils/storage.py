"""Write content to disk only when it changed."""

from pathlib import Path

from change_detector.core.detector import ChangeDetector
from change_detector.utils.logger import get_logger

logger = get_logger(__name__)


def write_if_changed(
    detector: ChangeDetector[str] | ChangeDetector[bytes],
    filepath: Path,
    content: str | bytes | bytearray | memoryview,
) -> bool:
    """
    Save content to a file unless it matches the last content seen by the detector.

    The detector, not the file on disk, is the reference: a file edited by
    someone else is not noticed. If the write fails the detector is rolled
    back, so retrying with the same content writes it.

    Args:
        detector: Detector tracking this file's content
        filepath: Path to save to
        content: Text (written as UTF-8) or bytes-like data

    Returns:
        True if the file was written

    Raises:
        OSError: If the file cannot be written
    """
    previous_hash = detector.hash
    if not detector.changed(content):
        logger.debug(f"Skipping unchanged write to {filepath}")
        return False

    filepath = Path(filepath)
    binary = isinstance(content, (bytes, bytearray, memoryview))

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        if binary:
            filepath.write_bytes(content)
        else:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(content)
    except Exception:
        detector._restore(previous_hash)
        raise

    size = memoryview(content).nbytes if binary else len(content)
    logger.info(f"Wrote {size} {'bytes' if binary else 'chars'} to {filepath}")
    return True

"""Poll files and report whenever their contents change."""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from change_detector.core.registry import DetectorRegistry
from change_detector.utils.hash import compute_hash
from change_detector.utils.logger import get_logger, log_event

logger = get_logger("watch")


def poll_once(
    registry: DetectorRegistry[Path, bytes],
    paths: list[Path],
    missing: set[Path],
) -> list[Path]:
    """
    Read every file once and feed it to its detector.

    A file that is missing or unreadable is reported the first time it
    cannot be read and its detector is dropped, so it counts as changed when
    it can be read again.

    Returns:
        Paths whose contents changed since the previous poll
    """
    changed = []
    for path in paths:
        try:
            content = path.read_bytes()
        except OSError as e:
            if path not in missing:
                missing.add(path)
                registry.forget(path)
                if isinstance(e, FileNotFoundError):
                    event_type, reason = "file_missing", "missing"
                else:
                    event_type, reason = "file_unreadable", f"unreadable: {e.strerror}"
                print(f"  ✗ {path} ({reason})")
                log_event(logger, event_type, f"{path} is {reason}", path=str(path))
            continue

        missing.discard(path)
        if registry.changed(path, content):
            changed.append(path)
            print(f"  • {path} changed (sha256 {compute_hash(content)[:16]}, {len(content)} bytes)")
            log_event(
                logger,
                "file_changed",
                f"{path} changed",
                path=str(path),
                size=len(content),
                hash=registry.get(path).hash,
            )
    return changed


async def main():
    """Watch files until interrupted or the iteration limit is reached."""
    parser = argparse.ArgumentParser(description="Report when watched files change")
    parser.add_argument("files", nargs="+", type=Path, help="Files to watch")
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between polls (default: 1.0)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        help="Stop after this many polls (default: run forever)",
    )

    args = parser.parse_args()

    registry: DetectorRegistry[Path, bytes] = DetectorRegistry(value_type=bytes)

    print(f"Watching {len(args.files)} file(s) every {args.interval}s...")
    missing: set[Path] = set()
    polls = 0
    while args.iterations is None or polls < args.iterations:
        poll_once(registry, args.files, missing)
        polls += 1
        if args.iterations is None or polls < args.iterations:
            await asyncio.sleep(args.interval)

    print(f"\n✓ Done after {polls} poll(s)")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass

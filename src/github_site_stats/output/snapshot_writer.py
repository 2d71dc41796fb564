"""JSON output writer for the site snapshot."""

import json
from pathlib import Path

from github_site_stats.exceptions import FilesystemError
from github_site_stats.models.snapshot import Snapshot


def serialize_snapshot(snapshot: Snapshot) -> str:
    """Render the snapshot document as pretty-printed JSON."""
    return json.dumps(snapshot.to_document(), indent=2, ensure_ascii=False)


def write_snapshot(snapshot: Snapshot, output_path: Path) -> Path:
    """Write the snapshot to ``output_path``, replacing any previous file.

    Args:
        snapshot: Collected snapshot
        output_path: Destination file; missing parent directories are created

    Returns:
        Path to written file

    Raises:
        FilesystemError: If the directory or file cannot be written
    """
    content = serialize_snapshot(snapshot)

    try:
        # Ensure parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FilesystemError(f"Could not write {output_path}: {e}", path=output_path) from e

    return output_path

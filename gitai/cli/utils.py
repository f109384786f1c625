"""CLI Utility Functions"""

import os
import sys
import tempfile
from pathlib import Path


def write_commit_template(message: str) -> Path:
    """Write ``message`` to a temp file git can use as a commit template."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.gitcommit', prefix='gitai-', delete=False, encoding='utf-8') as tmp:
        tmp.write(message)
    return Path(tmp.name)


def remove_commit_template(path: Path) -> None:
    try:
        os.unlink(path)
    except OSError as e:
        # Log to stderr so temp files don't silently accumulate
        print(f"Warning: Could not delete temp file {path}: {e}", file=sys.stderr)

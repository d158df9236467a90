"""Console + file output capture used by the driver scripts."""

from __future__ import annotations
from datetime import datetime
from pathlib import Path
import sys


class TeeLogger:
    """Logger that writes to both console and file, compatible with redirect_stdout."""

    def __init__(self, file_path: str):
        self.terminal = sys.stdout
        self.log_file = open(file_path, 'w', encoding='utf-8')

    def write(self, message):
        self.terminal.write(message)
        self.log_file.write(message)
        return len(message)

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def close(self):
        if self.log_file:
            self.log_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def log_path(logs_dir: str | Path, prefix: str) -> Path:
    """Timestamped log file path under logs_dir, creating the directory."""
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return logs_dir / f"{prefix}_{timestamp}.log"

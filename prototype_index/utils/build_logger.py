"""
Build logger for tracking index page generation.

Supports configurable log levels (NONE, INFO, DEBUG) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import sys
import time
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from prototype_index.models import PrototypeCard


class LogLevel(Enum):
    """Logging levels for build output."""

    NONE = 0
    INFO = 1
    DEBUG = 2


class BuildLogger:
    """Centralized logger for page builds with configurable levels."""

    _instance: Optional["BuildLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("PROTOTYPE_INDEX_LOG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        log_file = os.getenv("PROTOTYPE_INDEX_LOG_FILE")
        self.log_file = Path(log_file) if log_file else None

        self._initialized = True

    @classmethod
    def reset(cls):
        """Drop the singleton so the next get_logger() re-reads the environment."""
        cls._instance = None

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """
        Append log entry to the JSON Lines file.

        The log file is best-effort: an unwritable path is reported on stderr
        and never changes the outcome of the build.
        """
        if self.log_file is None:
            return

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
        except OSError as e:
            print(f"⚠️  Could not write build log {self.log_file}: {e}", file=sys.stderr)

    def log_build_start(
        self,
        output_path: Path,
        slugs: List[str],
        variant: str,
    ) -> str:
        """
        Log the start of a build.

        Returns:
            Build ID (UUID string) for tracking this build
        """
        build_id = str(uuid.uuid4())

        if self._should_log(LogLevel.INFO):
            timestamp = self._format_timestamp()
            print(
                f"[{timestamp}] 🔵 Build: {variant} page | {len(slugs)} slug(s) | output: {output_path}"
            )

        return build_id

    def log_card(self, build_id: str, card: PrototypeCard):
        """Log a resolved card (DEBUG only)."""
        if not self._should_log(LogLevel.DEBUG):
            return

        print(f"  [{build_id[:8]}] {card.slug} -> {card.name} | {card.url}")

    def log_build_complete(
        self,
        build_id: str,
        output_path: Path,
        slugs: List[str],
        variant: str,
        bytes_written: int,
        start_time: float,
        end_time: Optional[float] = None,
    ):
        """Log a finished build to console and file."""
        end_time = end_time if end_time is not None else time.time()
        latency_ms = (end_time - start_time) * 1000

        if self._should_log(LogLevel.INFO):
            timestamp = self._format_timestamp()
            parts = [
                f"{len(slugs)} prototype(s)",
                f"{bytes_written:,} bytes",
                f"{latency_ms:.1f}ms",
            ]
            print(f"[{timestamp}] ✅ Build done: " + " | ".join(parts))

        self._write_to_file({
            "build_id": build_id,
            "timestamp": self._format_timestamp(),
            "status": "ok",
            "variant": variant,
            "output_path": str(output_path),
            "slugs": slugs,
            "bytes_written": bytes_written,
            "timing": {
                "latency_ms": latency_ms,
                "start_time": datetime.fromtimestamp(start_time).isoformat(),
                "end_time": datetime.fromtimestamp(end_time).isoformat(),
            },
        })

    def log_build_error(
        self,
        build_id: str,
        output_path: Path,
        error: BaseException,
    ):
        """Log a failed build. The caller re-raises."""
        if self._should_log(LogLevel.INFO):
            timestamp = self._format_timestamp()
            print(f"[{timestamp}] ❌ Build error: {type(error).__name__}: {error}")

        self._write_to_file({
            "build_id": build_id,
            "timestamp": self._format_timestamp(),
            "status": "error",
            "output_path": str(output_path),
            "error": {"type": type(error).__name__, "message": str(error)},
        })


def get_logger() -> BuildLogger:
    """Get the singleton logger instance."""
    return BuildLogger()

"""JSON-based structured logger for tracking eligibility checks."""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from thumbnailer.core.shapes import Eligibility


class LogLevel(str, Enum):
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"


class StructuredLogger:
    """JSON logger for check events."""

    def __init__(self, log_dir: str = ".thumbnailer/logs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"{timestamp}.log"

    def log(self, level: LogLevel, **data: Any) -> None:
        entry = {
            "timestamp": datetime.now().isoformat(),
            "level": level.value,
            **data,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(entry) + "\n")

    def log_check_start(self, paths: list[str], heif: bool) -> None:
        self.log(LogLevel.INFO, event="check_start", paths=paths, heif=heif)

    def log_file_result(self, result: Eligibility) -> None:
        self.log(
            LogLevel.INFO if result.eligible else LogLevel.WARNING,
            event="file_result",
            eligible=result.eligible,
            **result.model_dump(mode="json"),
        )

    def log_file_error(self, path: str, error_type: str, error_message: str) -> None:
        self.log(
            LogLevel.ERROR,
            event="file_error",
            path=path,
            error_type=error_type,
            error_message=error_message,
        )

    def log_check_complete(
        self, total_files: int, eligible_files: int, duration_s: float
    ) -> None:
        self.log(
            LogLevel.INFO,
            event="check_complete",
            total_files=total_files,
            eligible_files=eligible_files,
            ineligible_files=total_files - eligible_files,
            duration_s=duration_s,
        )

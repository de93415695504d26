"""Speedo - Report where your program spends its time.

Renders the timing statistics collected between pairs of source
checkpoints as a fixed-width text table.

Example:
    ```python
    from speedo import Checkpoint, MultiMeasurement, Reporter

    reporter = Reporter()
    reporter.add(
        MultiMeasurement(
            start=Checkpoint(file="src/solver.cc", line=12),
            end=Checkpoint(file="src/solver.cc", line=40),
            count=100,
            average_duration=1250,
            overall_duration=125000,
        )
    )
    reporter.print()
    ```
"""

from .config import Config
from .exceptions import ConfigError, HomeDirectoryError, LogWriteError, SpeedoError
from .models import Checkpoint, MultiMeasurement
from .persistence import log_file_name, save_log
from .reporter import Align, Reporter, crop_path, insert_separators, pad, print_report, rule

__version__ = "0.1.0"

__all__ = [
    # Models
    "Checkpoint",
    "MultiMeasurement",
    # Reporter
    "Reporter",
    "print_report",
    # Layout helpers
    "Align",
    "pad",
    "rule",
    "crop_path",
    "insert_separators",
    # Configuration
    "Config",
    # Persistence
    "log_file_name",
    "save_log",
    # Exceptions
    "SpeedoError",
    "ConfigError",
    "HomeDirectoryError",
    "LogWriteError",
]

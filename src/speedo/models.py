"""Core data models for Speedo.

This module defines the measurement records consumed by the reporter:
- Checkpoint: A source location where timing starts or ends
- MultiMeasurement: Aggregated statistics between two checkpoints
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Checkpoint(BaseModel):
    """A source location marking where timing starts or ends.

    Attributes:
        file: Path of the source file.
        line: Line number within the file.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(ge=1)


class MultiMeasurement(BaseModel):
    """Timing statistics collected between a start and an end checkpoint.

    Durations are whole microseconds.

    Attributes:
        start: Where the measurement began.
        end: Where the measurement ended.
        count: How often the span was measured.
        average_duration: Mean duration per occurrence.
        overall_duration: Accumulated duration of all occurrences.
    """

    model_config = ConfigDict(frozen=True)

    start: Checkpoint
    end: Checkpoint
    count: int = 0
    average_duration: int = 0
    overall_duration: int = 0

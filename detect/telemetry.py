from __future__ import annotations

import logging
from dataclasses import dataclass


LOGGER = logging.getLogger("telemetry")


@dataclass(frozen=True)
class TimingRecord:
    subtractor: str
    found: bool
    elapsed_ms: float
    budget_ms: float


def frame_budget_ms(frames_per_second: int) -> float:
    """Time available per frame at the given rate (inf for a non-positive rate)."""
    if frames_per_second <= 0:
        return float("inf")
    return 1000.0 / frames_per_second


def log_timing(subtractor: str, found: bool, elapsed_ms: float, budget_ms: float) -> TimingRecord:
    record = TimingRecord(
        subtractor=subtractor, found=found, elapsed_ms=elapsed_ms, budget_ms=budget_ms
    )
    LOGGER.debug(
        "detect.timing subtractor=%s found=%s elapsed_ms=%.3f budget_ms=%.3f",
        record.subtractor,
        record.found,
        record.elapsed_ms,
        record.budget_ms,
    )
    if elapsed_ms > budget_ms:
        LOGGER.warning(
            "detect.timing_budget_exceeded subtractor=%s elapsed_ms=%.3f budget_ms=%.3f",
            record.subtractor,
            record.elapsed_ms,
            record.budget_ms,
        )
    return record

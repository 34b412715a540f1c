from __future__ import annotations

"""
Runtime report for one concatenation run.

Collected by the runner and the concatenator:
- inputs / files_total: raw tokens given and files resolved from them
- bytes_written: UTF-8 bytes written to the output, separators included
- encodings: how many files each cascade step decoded
- time_by_stage: wall time spent resolving and concatenating
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class ConcatReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    inputs: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None

    files_total: int = 0
    files_written: int = 0
    bytes_written: int = 0
    encodings: Dict[str, int] = field(default_factory=dict)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"resolve": 0.0, "concat": 0.0}
    )

    def add_encoding(self, encoding: str) -> None:
        self.encodings[encoding] = self.encodings.get(encoding, 0) + 1

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    @property
    def is_empty(self) -> bool:
        return self.files_total == 0

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_dict(self) -> dict:
        return {
            "inputs": list(self.inputs),
            "output_path": str(self.output_path) if self.output_path is not None else None,
            "files_total": self.files_total,
            "files_written": self.files_written,
            "bytes_written": self.bytes_written,
            "encodings": dict(self.encodings),
            "time_by_stage": dict(self.time_by_stage),
            "duration_s": self.duration_s,
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class StageTimer:
    def __init__(self, report: ConcatReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False

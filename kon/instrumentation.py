"""Writes scoped timing measurements as a Chrome trace-event JSON file."""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from kon.timer import Timer


@dataclass
class DebugFrame:
    """One completed measurement; times in microseconds and nanoseconds."""

    duration: int
    thread_id: int
    start_time: int
    name: str


class Instrumentor:
    """Streams :class:`DebugFrame` records into a trace file."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self.clock = clock
        self._file: IO[str] | None = None
        self._profile_count = 0
        self._file_start_time = 0

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _require_open(self) -> IO[str]:
        if self._file is None:
            raise RuntimeError("instrumentor file is not open")
        return self._file

    def open_file(self, path: str | Path) -> None:
        if self._file is not None:
            self.close_file()
        self._file = open(path, "w", encoding="utf-8")
        self._profile_count = 0
        self._file.write('{"otherData": {},"traceEvents":[\n')
        self._file.flush()
        self._file_start_time = self.clock()

    def write_debug_frame(self, frame: DebugFrame) -> None:
        file = self._require_open()
        if self._profile_count > 0:
            file.write(",")
        self._profile_count += 1
        timestamp = (frame.start_time - self._file_start_time) // 1000
        file.write(
            "{"
            '"cat":"function",'
            f'"dur":{frame.duration},'
            f'"name":{json.dumps(str(frame.name))},'
            '"ph":"X",'
            '"pid":0,'
            f'"tid":{frame.thread_id},'
            f'"ts":{timestamp}'
            "}\n"
        )
        file.flush()

    def close_file(self) -> None:
        file = self._require_open()
        file.write("\n]}")
        file.close()
        self._file = None

    def __enter__(self) -> Instrumentor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._file is not None:
            self.close_file()


class InstrumentorMeasure:
    """Times a ``with`` block and records it on an :class:`Instrumentor`."""

    def __init__(self, instrumentor: Instrumentor, name: object = "_null",
                 thread_id: int = 0) -> None:
        self.instrumentor = instrumentor
        self.name = str(name)
        self.thread_id = thread_id
        self._timer = Timer(clock=instrumentor.clock)

    def __enter__(self) -> InstrumentorMeasure:
        self._timer.start_timer()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._timer.end_timer()
        self.instrumentor.write_debug_frame(
            DebugFrame(
                duration=self._timer.elapsed_us(),
                thread_id=self.thread_id,
                start_time=self._timer.start,  # type: ignore[arg-type]
                name=self.name,
            )
        )
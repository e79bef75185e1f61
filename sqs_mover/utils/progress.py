# Copyright 2025 Loopper-AI
# Progress reporting for the transfer loop

from __future__ import annotations

from typing import IO, Protocol

from tqdm import tqdm


class ProgressReporter(Protocol):
    """Receives (count, total) after every completed batch."""

    def report(self, count: int, total: int) -> None: ...

    def close(self) -> None: ...


class NullReporter:
    """Headless reporter that discards progress."""

    def report(self, count: int, total: int) -> None:
        pass

    def close(self) -> None:
        pass


class TqdmReporter:
    """Terminal progress bar backed by tqdm."""

    def __init__(self, total: int, file: IO[str] | None = None, disable: bool = False):
        self._bar = tqdm(
            total=total,
            unit="msg",
            desc="Moving",
            ncols=80,
            file=file,
            disable=disable,
            leave=True,
        )

    def report(self, count: int, total: int) -> None:
        if total != self._bar.total:
            self._bar.total = total
        self._bar.update(count - self._bar.n)

    def close(self) -> None:
        self._bar.close()

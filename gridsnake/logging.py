from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from gridsnake.core.interfaces import Snapshot

SESSION_KEYS = ["step", "ticks", "length", "reason", "food_left"]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class NullLogger:
    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def make_session_logger(logger: Logger) -> Callable[[int, Snapshot], None]:
    """
    Returns a function(session: int, final: Snapshot) -> None that writes one
    row per finished session and flushes.
    """
    def _on_session_end(session: int, final: Snapshot) -> None:
        logger.log(session, {
            "ticks": final.tick,
            "length": len(final.body),
            "reason": final.reason.value if final.reason else "quit",
            "food_left": len(final.food),
        })
        logger.flush()
    return _on_session_end

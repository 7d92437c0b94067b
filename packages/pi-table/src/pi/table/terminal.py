"""Terminal abstraction: output width discovery and the output sink.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal`` backed by
``sys.stdout``. Width discovery never fails; when stdout is not attached to a
terminal the configured fallback width is used.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

from pi.table.config import Config


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Writer(Protocol):
    """Anything rendered table lines can be written to."""

    def write(self, data: str) -> object: ...


class Terminal(Protocol):
    """Interface for the terminal a table is laid out for."""

    @property
    def columns(self) -> int: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by a process stream (``sys.stdout`` by default)."""

    def __init__(self, config: Config | None = None, stream: TextIO | None = None) -> None:
        self._config = config or Config.from_env()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that redirections of sys.stdout are honoured.
        return self._stream if self._stream is not None else sys.stdout

    @property
    def columns(self) -> int:
        if self._config.columns is not None:
            return self._config.columns
        try:
            columns = os.get_terminal_size(self.stream.fileno()).columns
        except (AttributeError, ValueError, OSError):
            return self._config.fallback_columns
        return columns if columns > 0 else self._config.fallback_columns

    def write(self, data: str) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError:
            pass

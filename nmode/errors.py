"""Error type and message collector for fatal configuration errors."""

from __future__ import annotations


class NMODEError(Exception):
    """Raised when the program cannot continue."""


class ErrorHandler:
    """Collects an error message piece by piece and raises it as one error."""

    _shared: ErrorHandler | None = None

    def __init__(self) -> None:
        self._parts: list[str] = []

    @classmethod
    def instance(cls) -> ErrorHandler:
        """Return the handler shared by the whole program."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def write(self, text: object) -> ErrorHandler:
        """Append text to the pending message."""
        self._parts.append(str(text))
        return self

    def message(self) -> str:
        """Return the pending message."""
        return "".join(self._parts)

    def push(self, message: str | None = None, *args: object) -> None:
        """Append an optional printf-style message, then raise the whole text."""
        if message is not None:
            self.write(message % args if args else message)
        text = self.message()
        self._parts.clear()
        raise NMODEError(text)
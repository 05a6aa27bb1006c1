"""
Export value types.

OutputType selects the renderer; ExportPayload pairs it with the rendered
bytes. Result and ExportableTransaction carry the outcome of registering a
transaction together with its optional ticket, the way use-case
controllers hand them to views.
"""

from concurrent.futures import Future
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class OutputType(Enum):
    """Supported ticket export formats."""

    PREVIEW_HTML = "preview_html"      # UTF-8 HTML with a monospaced <pre>
    PDF = "pdf"                        # Single A4 page, Courier
    PRINTER_TICKET = "printer_ticket"  # ESC/POS bytes ending in a paper cut

    @property
    def content_type(self) -> str:
        """MIME type of payloads of this type."""
        return _CONTENT_TYPES[self]

    @property
    def extension(self) -> str:
        """File extension, dot included."""
        return _EXTENSIONS[self]

    @classmethod
    def parse(cls, value: Any) -> "OutputType":
        """Accept an OutputType or its name (``"PDF"``, ``"preview_html"``).

        Raises:
            ValueError: If the value names no output type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Unknown output type: {value!r}")


_CONTENT_TYPES = {
    OutputType.PREVIEW_HTML: "text/html; charset=utf-8",
    OutputType.PDF: "application/pdf",
    OutputType.PRINTER_TICKET: "application/octet-stream",
}

_EXTENSIONS = {
    OutputType.PREVIEW_HTML: ".html",
    OutputType.PDF: ".pdf",
    OutputType.PRINTER_TICKET: ".bin",
}


@dataclass(frozen=True)
class ExportPayload:
    """Rendered ticket bytes tagged with their format."""

    output_type: OutputType
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def filename(self, stem: str) -> str:
        """File name for saving this payload, e.g. ``ticket-42.pdf``."""
        return f"{stem}{self.output_type.extension}"


class ResultType(Enum):
    """Outcome of a use-case process."""

    OK = "ok"
    CANCEL = "cancel"
    ERROR = "error"


def _completed(value: T) -> "Future[T]":
    future: Future = Future()
    future.set_result(value)
    return future


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a use-case process with its optional value."""

    result: ResultType
    value: Optional[T] = None

    @property
    def is_ok(self) -> bool:
        return self.result is ResultType.OK

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(ResultType.OK, value)

    @classmethod
    def error(cls) -> "Result[T]":
        return cls(ResultType.ERROR)

    @classmethod
    def cancel(cls) -> "Result[T]":
        return cls(ResultType.CANCEL)

    @classmethod
    def completed(cls, result: ResultType, value: Optional[T] = None) -> "Future[Result[T]]":
        """Already-resolved future holding a new Result."""
        return _completed(cls(result, value))


@dataclass(frozen=True)
class ExportableTransaction:
    """A transaction result plus the ticket exported for it, if any."""

    result: Result[Any]
    export_payload: Optional[ExportPayload] = None

    @classmethod
    def error(cls) -> "ExportableTransaction":
        return cls(Result.error())

    @classmethod
    def cancel(cls) -> "ExportableTransaction":
        return cls(Result.cancel())

    @classmethod
    def ok(cls, tx: Any, output_type: OutputType, payload: bytes) -> "ExportableTransaction":
        """Successful registration with its rendered ticket."""
        return cls(Result.ok(tx), ExportPayload(output_type, payload))

    @classmethod
    def ok_without_payload(cls, tx: Any) -> "ExportableTransaction":
        """Successful registration where no ticket was requested."""
        return cls(Result.ok(tx))

    @classmethod
    def error_completed(cls) -> "Future[ExportableTransaction]":
        return _completed(cls.error())

    @classmethod
    def cancel_completed(cls) -> "Future[ExportableTransaction]":
        return _completed(cls.cancel())

    @classmethod
    def ok_completed(
        cls, tx: Any, output_type: OutputType, payload: bytes
    ) -> "Future[ExportableTransaction]":
        return _completed(cls.ok(tx, output_type, payload))

    @classmethod
    def ok_without_payload_completed(cls, tx: Any) -> "Future[ExportableTransaction]":
        return _completed(cls.ok_without_payload(tx))

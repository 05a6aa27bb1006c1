"""Ticket export - output types, payloads and the async exporter."""

from comisiones.export.types import (
    ExportableTransaction,
    ExportPayload,
    OutputType,
    Result,
    ResultType,
)
from comisiones.export.exporter import TicketExporter

__all__ = [
    "ExportableTransaction",
    "ExportPayload",
    "OutputType",
    "Result",
    "ResultType",
    "TicketExporter",
]

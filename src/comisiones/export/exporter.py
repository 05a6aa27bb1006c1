"""Ticket exporter: asynchronous dispatch of ticket rendering.

Selects the renderer for the requested output type and runs it on the
executor supplied by the caller. Arguments are validated before anything
is scheduled, so a bad call raises immediately instead of returning a
failed future.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Dict, TypeVar

from comisiones.export.types import ExportPayload, OutputType
from comisiones.printing.base import TicketRenderer
from comisiones.printing.escpos import EscPosTicketRenderer
from comisiones.printing.html import HtmlTicketRenderer
from comisiones.printing.pdf import PdfTicketRenderer

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")


def _then(source: Future[S], fn: Callable[[S], T]) -> Future[T]:
    """Future resolving to ``fn(result)`` once ``source`` completes."""
    target: Future[T] = Future()

    def _done(done: Future[S]) -> None:
        if done.cancelled():
            target.cancel()
            return
        exc = done.exception()
        if exc is not None:
            target.set_exception(exc)
            return
        try:
            target.set_result(fn(done.result()))
        except Exception as err:
            target.set_exception(err)

    source.add_done_callback(_done)
    return target


class TicketExporter:
    """Renders transaction tickets asynchronously on a caller-owned executor.

    The exporter keeps no queue and applies no limits of its own; how many
    renders run at once is up to the executor.
    """

    def __init__(self, executor: Executor) -> None:
        """Initialize the exporter.

        Args:
            executor: Executor that runs every render task

        Raises:
            ValueError: If no executor is given
        """
        if executor is None:
            raise ValueError("An executor must be provided")
        self._executor = executor
        renderers = (HtmlTicketRenderer(), PdfTicketRenderer(), EscPosTicketRenderer())
        self._renderers: Dict[OutputType, TicketRenderer] = {
            OutputType.parse(renderer.output_type): renderer for renderer in renderers
        }

    def renderer_for(self, output_type: OutputType | str) -> TicketRenderer:
        """Renderer used for an output type."""
        return self._renderers[OutputType.parse(output_type)]

    def export(self, tx: Any, output_type: OutputType | str, config: Any) -> Future[bytes]:
        """Render a ticket in the background.

        Args:
            tx: Transaction snapshot
            output_type: Requested format (enum member or its name)
            config: Configuration snapshot

        Returns:
            Future resolving to the rendered bytes. Renderer failures are
            delivered through the future unchanged.

        Raises:
            ValueError: If an argument is missing or the output type is unknown
        """
        if tx is None:
            raise ValueError("tx is required")
        if output_type is None:
            raise ValueError("output_type is required")
        if config is None:
            raise ValueError("config is required")

        kind = OutputType.parse(output_type)
        renderer = self._renderers[kind]
        logger.debug(f"Scheduling {kind.name} ticket export for transaction {getattr(tx, 'id', None)}")
        return self._executor.submit(renderer.render, config, tx)

    def export_payload(
        self, tx: Any, output_type: OutputType | str, config: Any
    ) -> Future[ExportPayload]:
        """Like export(), but resolves to an ExportPayload tagged with its type."""
        rendered = self.export(tx, output_type, config)
        kind = OutputType.parse(output_type)
        return _then(rendered, lambda data: ExportPayload(kind, data))

    def export_async(
        self, tx: Any, output_type: OutputType | str, config: Any
    ) -> asyncio.Future[bytes]:
        """Awaitable export() for asyncio callers.

        Must be called from a running event loop. Validation errors are
        raised here, before anything is scheduled.
        """
        return asyncio.wrap_future(self.export(tx, output_type, config))

"""
Abstract base class for ticket renderers.

Every output format implements the same contract: take the configuration
and transaction snapshots, return the encoded ticket bytes.
"""

from abc import ABC, abstractmethod
from typing import Any


class TicketRenderer(ABC):
    """Stateless renderer for one output format.

    Subclasses set ``output_type`` to the name of the OutputType member they
    produce.
    """

    output_type: str = ""

    @abstractmethod
    def render(self, config: Any, tx: Any) -> bytes:
        """
        Render a ticket.

        Args:
            config: Configuration snapshot
            tx: Transaction snapshot

        Returns:
            Encoded ticket in this renderer's format
        """
        ...

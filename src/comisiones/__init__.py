"""Ticket export pipeline for the commissions point of sale."""

__version__ = "1.0.0"

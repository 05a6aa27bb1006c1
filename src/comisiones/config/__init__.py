"""Runtime configuration for the ticket export pipeline."""

from comisiones.config.settings import ExportSettings, Settings, create_executor, get_settings

__all__ = ["ExportSettings", "Settings", "create_executor", "get_settings"]

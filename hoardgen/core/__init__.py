"""Core configuration and utilities."""

from hoardgen.core.config import settings
from hoardgen.core.logging import configure_logging

__all__ = ["settings", "configure_logging"]

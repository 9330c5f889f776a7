"""
Observability package.

Provides structured logging and tracing via Logfire.
"""
from observability.logfire_config import LogfireConfig

__all__ = ["LogfireConfig"]

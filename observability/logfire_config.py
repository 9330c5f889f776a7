"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the API and the
template engine.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; logs stay local without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token, Logfire is
    configured for local console output only.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire with project token.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment name (or set ENVIRONMENT env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="prompt-stumble-api",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
        )

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized

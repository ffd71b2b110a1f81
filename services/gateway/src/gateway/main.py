"""
Service entry point.

Runs the gateway with uvicorn after validating configuration.
"""

from __future__ import annotations

import sys

import uvicorn

from gateway.app import create_app
from gateway.config import ConfigurationError, get_settings


def main() -> int:
    """
    Run the service with uvicorn.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        # Logging is not configured yet
        print(f"FATAL: Configuration error\n{e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"FATAL: Unexpected error during configuration\n{e}", file=sys.stderr)
        return 1

    uvicorn.run(
        create_app(),
        host=settings.server.host,
        port=settings.server.port,
        log_level="warning",
        access_log=False,  # Request middleware logs each request
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Quick Convert server launcher — serves the convert API on localhost."""

from __future__ import annotations

import socket
import sys

import uvicorn

from quickconvert.config import ConfigurationError, get_settings


def find_free_port(host: str = "127.0.0.1") -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def main() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        sys.exit(f"quickconvert-server: {e}")

    port = settings.port or find_free_port(settings.host)
    print(f"Starting {settings.app_name} on http://{settings.host}:{port}")
    print("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "quickconvert.main:app",
        host=settings.host,
        port=port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()

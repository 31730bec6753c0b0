"""Length Converter launcher — starts the API server with uvicorn."""

from __future__ import annotations

import socket
import sys
import traceback

import uvicorn

from lengthconv.config import settings


def find_free_port(host: str = "127.0.0.1") -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def resolve_port(configured: int, host: str = "127.0.0.1") -> int:
    return configured if configured > 0 else find_free_port(host)


def serve() -> None:
    port = resolve_port(settings.port, settings.host)
    print(f"Starting {settings.app_name} on http://{settings.host}:{port}")
    print("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "lengthconv.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    try:
        serve()
    except Exception:
        print(traceback.format_exc())
        print("\n--- Length Converter crashed. ---")
        sys.exit(1)


if __name__ == "__main__":
    main()

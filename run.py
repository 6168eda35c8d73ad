"""Serve the document store with Uvicorn.

Host and port come from the HOST and PORT environment variables
(defaults ``0.0.0.0`` and ``8000``). Storage settings are read by
``settings.get_settings`` as usual.

Usage:
    python run.py
"""
import os

from uvicorn import Config, Server


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app="app:app", host=host, port=port, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    main()

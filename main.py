from __future__ import annotations

from interface.cli import configure_logging

configure_logging()

# ASGI entry point: `uvicorn main:app`.
from interface.api import app  # noqa: E402,F401
from interface.cli import main as cli_main  # noqa: E402

if __name__ == "__main__":
    cli_main()

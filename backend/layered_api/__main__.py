"""
Layered API — Process Entry Point
==================================

Usage:
    python -m layered_api
    layered-api

Takes no arguments. Serves the application on port 3000; backends are chosen
from the environment (see config.py).
"""

import uvicorn

from layered_api.config import SERVER_PORT


def main() -> None:
    uvicorn.run(
        "layered_api.main:app",
        host="0.0.0.0",
        port=SERVER_PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()

"""
Run the Midas API with uvicorn.
"""

from __future__ import annotations

import argparse
import os

import uvicorn


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve the Midas API.")
    parser.add_argument(
        "--host",
        dest="host",
        default="0.0.0.0",
        help="Interface to bind.",
    )
    parser.add_argument(
        "--port",
        dest="port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to listen on (defaults to $PORT or 8000).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only).",
    )
    args = parser.parse_args()

    uvicorn.run("midas.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

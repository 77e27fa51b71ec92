#!/usr/bin/env python
"""
Recruitment Admin server launcher

Usage:
    python run.py                    # HOST/PORT from the environment (default 0.0.0.0:3000)
    python run.py -p 8080            # override port
    python run.py --reload           # auto-reload (development)
"""
import argparse

import uvicorn

from app.core.config import get_settings


def parse_args():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Recruitment Admin server")
    parser.add_argument("-p", "--port", type=int, default=settings.port, help=f"port (default: {settings.port})")
    parser.add_argument("--host", type=str, default=settings.host, help=f"host (default: {settings.host})")
    parser.add_argument("--reload", action="store_true", help="auto-reload (development)")
    return parser.parse_args()


def main():
    args = parse_args()
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
E-bank backend entry point.

Starts uvicorn on HOST:PORT (see ebank/core/config.py).
"""

import uvicorn

from ebank.core.config import HOST, PORT


if __name__ == "__main__":
    uvicorn.run("ebank.main:app", host=HOST, port=PORT)

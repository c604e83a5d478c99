#!/usr/bin/env python3
"""
Entry point for running as module: python -m cachebot
"""

import sys
import asyncio


def run() -> None:
    from cachebot.app import main

    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()

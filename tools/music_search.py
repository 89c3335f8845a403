#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


async def run(query: str | None) -> None:
    from tools._common import get_view_state, print_json

    view = get_view_state()
    async with view.client:
        if query:
            await view.search_tracks(query)
        else:
            await view.load_retro_gaming_tracks()
    print_json(view.state)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search Spotify tracks, or load the retro gaming selection")
    parser.add_argument("query", nargs="?", help="Track query; omit for the retro gaming selection")
    args = parser.parse_args()
    asyncio.run(run(args.query))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


async def run(playlist_id: str | None) -> None:
    from tools._common import get_view_state, print_json

    view = get_view_state()
    async with view.client:
        if playlist_id:
            await view.load_playlist_tracks(playlist_id)
        else:
            await view.load_featured_playlists()
    print_json(view.state)


def main() -> None:
    parser = argparse.ArgumentParser(description="List featured playlists, or the tracks of one playlist")
    parser.add_argument("--playlist", help="Playlist id whose tracks should be listed")
    args = parser.parse_args()
    asyncio.run(run(args.playlist))


if __name__ == "__main__":
    main()

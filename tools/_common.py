from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel

from retrocatalog.core import CatalogViewState, SpotifyCatalogClient
from retrocatalog.core.settings import load_settings, log_level


def get_view_state() -> CatalogViewState:
    settings = load_settings()
    logging.basicConfig(level=log_level(settings), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return CatalogViewState(SpotifyCatalogClient(settings=settings))


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [_jsonable(item) for item in data]
    return data


def print_json(data: Any) -> None:
    print(json.dumps(_jsonable(data), indent=2, ensure_ascii=False))

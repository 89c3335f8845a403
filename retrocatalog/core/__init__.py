from .spotify_client import SpotifyCatalogClient, format_duration
from .view_state import CatalogViewState

__all__ = ["SpotifyCatalogClient", "CatalogViewState", "format_duration"]

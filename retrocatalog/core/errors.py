from __future__ import annotations


class CatalogError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class AuthError(CatalogError):
    def __init__(self, message: str = "Failed to get access token"):
        super().__init__("SPOTIFY_AUTH_FAILED", message)


class CatalogRequestError(CatalogError):
    pass

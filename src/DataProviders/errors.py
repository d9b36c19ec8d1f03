class CatalogError(Exception):
    """Base error for anything that goes wrong while loading the game catalog."""


class CatalogFetchError(CatalogError):
    """The request could not be built or sent, or the server refused it."""


class CatalogDecodeError(CatalogError):
    """The response body is not a valid game catalog."""

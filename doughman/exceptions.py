"""
Doughman Exceptions.

Only a failure to load recipe data raises. Bad recipe content never does:
it just contributes nothing to the totals.
"""

from typing import Any


# Error codes
RECIPE_STORE_UNAVAILABLE = "RECIPE_STORE_UNAVAILABLE"  # store.load() failed or returned garbage
INVALID_RECIPE_STORE = "INVALID_RECIPE_STORE"  # RECIPE_STORE path not importable or has no load()


class DoughError(Exception):
    """
    Coded Doughman error.

    Attributes:
        code: One of the error codes above
        details: Context for logs and API responses (store, path, error...)
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}" if details else code)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

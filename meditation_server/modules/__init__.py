"""Feature modules and their public exports."""

from . import accounts, scripts

__all__ = [
    "accounts",
    "scripts",
]

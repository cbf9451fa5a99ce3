"""Account domain: models and errors."""

from .exceptions import AccountAlreadyExistsError, AccountError
from .models import Account, AccountCreateInput

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountError",
    "AccountAlreadyExistsError",
]

"""Application services."""

from usercred.application.services.account_service import AccountService

__all__ = [
    "AccountService",
]

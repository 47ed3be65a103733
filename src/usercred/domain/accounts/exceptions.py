"""Account domain exceptions."""

from usercred.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class UserNotFoundError(EntityNotFoundError):
    """No live user row matches the given id."""

    def __init__(self, user_id: int | None) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class CredentialNotFoundError(EntityNotFoundError):
    """No live credential row matches the given id (or owner)."""

    def __init__(
        self,
        credential_id: int | None = None,
        owner_user_id: int | None = None,
    ) -> None:
        self.credential_id = credential_id
        self.owner_user_id = owner_user_id
        if credential_id is None and owner_user_id is not None:
            message = f"No credential found for user: {owner_user_id}"
        else:
            message = f"Credential not found: {credential_id}"
        super().__init__(
            message,
            code=ErrorCode.CREDENTIAL_NOT_FOUND,
            details={"credential_id": credential_id, "owner_user_id": owner_user_id},
        )

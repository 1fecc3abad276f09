from typing import Optional

from ..models import User
from ..repositories import UserRepository
from ..schemas import LoginRequest


def authenticate(users: UserRepository, credentials: LoginRequest) -> Optional[User]:
    """
    Return the user whose stored password equals the supplied one, else None.
    Plain string comparison: passwords are kept as given at registration.
    """
    user = users.find_by_username(credentials.username)
    if user is None or user.password != credentials.password:
        return None
    return user


def issue_token(user: User, prefix: str) -> str:
    # demo session token, never verified anywhere
    return f"{prefix}{user.id}"

"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the user persistence contract (port) the application depends on.
- Keep use cases independent from PostgreSQL / in-memory storage.

Collaborators
- domain.entities: User, UserMapped, UserCreateData, UserAvatarData
- infrastructure.repositories: in_memory.user, postgres.user

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Both implementations MUST behave identically for every method below.
"""

from typing import List, Optional, Protocol

from .entities import User, UserAvatarData, UserCreateData, UserMapped


class UserRepository(Protocol):
    """
    R: Interface for user persistence.

    Implementations must provide:
      - Creation with generated id, default avatar/role and timestamps
      - Lookup by email (full record, internal use by authentication)
      - Lookup by id and listing (password-stripped views)
      - Avatar update
    """

    def create(self, data: UserCreateData) -> None:
        """R: Persist a new user. Does not return the created record."""
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        """R: Exact, case-sensitive match. Includes the password hash."""
        ...

    def find_by_id(self, user_id: str) -> Optional[UserMapped]:
        """R: Password-stripped view or None."""
        ...

    def list(self) -> List[UserMapped]:
        """R: All users, password-stripped, no pagination."""
        ...

    def update_avatar(self, data: UserAvatarData) -> None:
        """R: Overwrite avatar_url of an existing user."""
        ...

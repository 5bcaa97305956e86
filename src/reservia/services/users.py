"""User registration."""

from dataclasses import dataclass
from typing import Protocol

from reservia.domain.writes import InsertSummary


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def create_user(self, profile: dict[str, object]) -> str:
        """Insert a profile and return its id."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(self, profile: dict[str, object]) -> InsertSummary:
        """Insert a new user record; duplicates are not detected."""
        return InsertSummary(inserted_id=self.repository.create_user(profile))

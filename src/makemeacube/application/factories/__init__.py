"""Application factories for repository access."""

from makemeacube.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]

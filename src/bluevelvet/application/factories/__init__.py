"""Application factories for repository access."""

from bluevelvet.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]

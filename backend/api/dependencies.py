"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations on top of the shared
Supabase client.
"""

from typing import TYPE_CHECKING, Callable

from modules.content.models import ContentKind

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.comments.interfaces import ICommentService
    from modules.comments.repository import CommentRepository
    from modules.content.interfaces import IContentService
    from modules.content.repository import ContentRepository
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and
    cached as singletons within the container; content and comment
    services are cached per ContentKind.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._content_repositories: dict[ContentKind, "ContentRepository"] = {}
        self._content_services: dict[ContentKind, "IContentService"] = {}
        self._comment_repositories: dict[ContentKind, "CommentRepository"] = {}
        self._comment_services: dict[ContentKind, "ICommentService"] = {}

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(users=self.user_repository)
        return self._auth_service

    def content_repository(self, kind: ContentKind) -> "ContentRepository":
        """Get the repository for stories or writings."""
        if kind not in self._content_repositories:
            from modules.content.repository import ContentRepository
            from shared.database import get_supabase_client
            self._content_repositories[kind] = ContentRepository(get_supabase_client(), kind)
        return self._content_repositories[kind]

    def content(self, kind: ContentKind) -> "IContentService":
        """Get the content service for stories or writings."""
        if kind not in self._content_services:
            from modules.content.service import ContentService
            self._content_services[kind] = ContentService(
                items=self.content_repository(kind),
                users=self.user_repository,
            )
        return self._content_services[kind]

    def comment_repository(self, kind: ContentKind) -> "CommentRepository":
        """Get the repository for comments on stories or writings."""
        if kind not in self._comment_repositories:
            from modules.comments.repository import CommentRepository
            from shared.database import get_supabase_client
            self._comment_repositories[kind] = CommentRepository(get_supabase_client(), kind)
        return self._comment_repositories[kind]

    def comments(self, kind: ContentKind) -> "ICommentService":
        """Get the comment service for one target kind."""
        if kind not in self._comment_services:
            from modules.comments.service import CommentService
            self._comment_services[kind] = CommentService(
                comments=self.comment_repository(kind),
                targets=self.content_repository(kind),
                users=self.user_repository,
            )
        return self._comment_services[kind]

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._auth_service = None
        self._content_repositories.clear()
        self._content_services.clear()
        self._comment_repositories.clear()
        self._comment_services.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls
# and as keys in app.dependency_overrides.


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_story_service() -> "IContentService":
    """FastAPI dependency for the story service."""
    return get_container().content(ContentKind.STORY)


def get_writing_service() -> "IContentService":
    """FastAPI dependency for the writing service."""
    return get_container().content(ContentKind.WRITING)


def get_story_comment_service() -> "ICommentService":
    """FastAPI dependency for comments on stories."""
    return get_container().comments(ContentKind.STORY)


def get_writing_comment_service() -> "ICommentService":
    """FastAPI dependency for comments on writings."""
    return get_container().comments(ContentKind.WRITING)


_CONTENT_DEPENDENCIES: dict[ContentKind, Callable[[], "IContentService"]] = {
    ContentKind.STORY: get_story_service,
    ContentKind.WRITING: get_writing_service,
}

_COMMENT_DEPENDENCIES: dict[ContentKind, Callable[[], "ICommentService"]] = {
    ContentKind.STORY: get_story_comment_service,
    ContentKind.WRITING: get_writing_comment_service,
}


def content_service_dependency(kind: ContentKind) -> Callable[[], "IContentService"]:
    """The dependency function serving content of ``kind``."""
    return _CONTENT_DEPENDENCIES[kind]


def comment_service_dependency(kind: ContentKind) -> Callable[[], "ICommentService"]:
    """The dependency function serving comments on ``kind``."""
    return _COMMENT_DEPENDENCIES[kind]

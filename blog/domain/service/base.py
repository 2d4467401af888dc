"""Base class and shared guards for domain services."""

from typing import Optional

import logfire

from blog.domain.error import ForbiddenError, NotAuthenticatedError
from blog.domain.value import Actor


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def require_admin(actor: Optional[Actor], action: str) -> Actor:
    """Ensure the caller may perform an admin-only action.

    Args:
        actor: Caller resolved by the session layer, None if anonymous
        action: Human-readable action for the error message

    Returns:
        The admin actor

    Raises:
        NotAuthenticatedError: If there is no actor
        ForbiddenError: If the actor is not an admin
    """
    if actor is None:
        logfire.warn("Unauthenticated admin action", action=action)
        raise NotAuthenticatedError()
    if not actor.is_admin:
        logfire.warn(
            "Forbidden admin action", action=action, user_id=str(actor.user_id)
        )
        raise ForbiddenError(action)
    return actor

"""FastAPI dependencies shared by the v1 endpoints.

Authentication itself happens upstream; the portal receives the
authenticated user id in the ``X-User-Id`` header and only checks that the
user exists and holds a role in the requested space.
"""

from collections.abc import Generator

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from portal.context import AppContext
from portal.db.models import User
from portal.repositories import space_repository, user_repository


def get_app_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(context: AppContext = Depends(get_app_context)) -> Generator[Session, None, None]:
    """Request-scoped database session.

    Yields:
        Database session
    """
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    x_user_id: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the authenticated user.

    Raises:
        HTTPException: 401 if the header is missing or the user is unknown
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user = user_repository.get_by_id(db, x_user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_space_role(
    space_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> str:
    """Require any role in the space of the request path.

    Returns:
        The user's role in the space

    Raises:
        HTTPException: 404 if the space does not exist, 403 if the user is
            not a member
    """
    if not space_repository.exists(db, space_id):
        raise HTTPException(status_code=404, detail="Space not found")
    role = space_repository.get_member_role(db, space_id, user.id)
    if role is None:
        raise HTTPException(status_code=403, detail="No access to this space")
    return role

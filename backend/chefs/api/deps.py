"""
Request dependencies shared by API routers.
"""
from typing import Any, Dict, Optional, Union
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from chefs.adapters.repositories_sqlite import SQLitePermissionsRepo
from chefs.core.database import get_db
from chefs.core.permissions import Permissions
from chefs.export.errors import ExportAuthorizationError
from chefs.export.permissions import check_permission
from chefs.export.types import ExportType
from chefs.schemas.user import CurrentUser, FormAccess


def get_current_user(request: Request, db: Session = Depends(get_db)) -> CurrentUser:
    """
    Resolve the authenticated principal and its form grants.

    Authentication middleware (Keycloak) runs upstream and stores the token
    claims, or a CurrentUser, on request.state.user.
    """
    user: Union[CurrentUser, Dict[str, Any], None] = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")

    if isinstance(user, CurrentUser):
        return user

    user_id = user.get("user_id") or user.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    access = SQLitePermissionsRepo(db).get_form_access(user_id)
    return CurrentUser(
        user_id=user_id,
        username=user.get("username") or user.get("preferred_username"),
        email=user.get("email"),
        forms=[FormAccess(form_id=form_id, permissions=perms) for form_id, perms in access.items()],
    )


def require_form_permissions(*permissions: Permissions):
    """
    Dependency factory guarding a /forms/{form_id} route.

    The user must hold every listed capability on the form; 401 otherwise.
    """
    def dependency(
        form_id: str,
        type: Optional[str] = None,
        current_user: CurrentUser = Depends(get_current_user),
    ) -> CurrentUser:
        export_type = ExportType.resolve(type).value
        try:
            for permission in permissions:
                check_permission(current_user, form_id, permission, export_type)
        except ExportAuthorizationError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        return current_user

    return dependency

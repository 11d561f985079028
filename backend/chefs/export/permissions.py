"""
Permission gate for exports.

Runs before any submission data is read.
"""
import logging

from chefs.core.permissions import Permissions
from chefs.export.errors import ExportAuthorizationError
from chefs.schemas.user import CurrentUser

logger = logging.getLogger(__name__)


def check_permission(
    current_user: CurrentUser,
    form_id: str,
    permission: Permissions,
    export_type: str,
) -> None:
    """
    Ensure the user holds a capability on the form.

    Raises:
        ExportAuthorizationError: Form not accessible or capability missing
    """
    access = current_user.form_access(form_id) if current_user else None
    if access is None or not access.has(permission):
        logger.warning(
            f"Export denied: user {getattr(current_user, 'user_id', None)} lacks "
            f"{getattr(permission, 'value', permission)} on form {form_id}"
        )
        raise ExportAuthorizationError(
            f"Current user does not have required permission(s) to export {export_type} data for this form."
        )

"""
Pydantic schemas for the authenticated principal.
"""
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class FormAccess(BaseModel):
    """Capabilities a user holds on one form."""

    form_id: str
    permissions: List[str] = []

    def has(self, permission: str) -> bool:
        return str(getattr(permission, "value", permission)) in self.permissions


class CurrentUser(BaseModel):
    """Authenticated principal with per-form grants."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: Optional[str] = None
    email: Optional[str] = None
    forms: List[FormAccess] = []

    def form_access(self, form_id: str) -> Optional[FormAccess]:
        return next((f for f in self.forms if f.form_id == form_id), None)

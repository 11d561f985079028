"""
Per-user capability grants on forms.

One row per (user, form, permission). Populated by the role/permission
management side of the platform; read-only here.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from chefs.core.database import Base


class UserFormAccess(Base):
    __tablename__ = "user_form_access"
    __table_args__ = (UniqueConstraint("user_id", "form_id", "permission"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    form_id = Column(String, ForeignKey("forms.id"), nullable=False, index=True)
    permission = Column(String, nullable=False)  # Permissions enum value

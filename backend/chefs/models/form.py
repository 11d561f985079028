from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Boolean, Text
from sqlalchemy.orm import relationship
from chefs.core.database import Base


class Form(Base):
    __tablename__ = "forms"

    id = Column(String, primary_key=True, index=True)  # UUID
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    enable_status_updates = Column(Boolean, default=False, nullable=False)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    versions = relationship(
        "FormVersion",
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="FormVersion.version.desc()",
    )


class FormVersion(Base):
    __tablename__ = "form_versions"

    id = Column(String, primary_key=True, index=True)  # UUID
    form_id = Column(String, ForeignKey("forms.id"), nullable=False, index=True)
    version = Column(Integer, nullable=False)
    schema = Column(JSON, nullable=False)  # form.io design document
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    form = relationship("Form", back_populates="versions")
    submissions = relationship("FormSubmission", back_populates="form_version", cascade="all, delete-orphan")

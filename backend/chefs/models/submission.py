from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Boolean
from sqlalchemy.orm import relationship
from chefs.core.database import Base


class FormSubmission(Base):
    __tablename__ = "form_submissions"

    id = Column(String, primary_key=True, index=True)  # UUID
    form_version_id = Column(String, ForeignKey("form_versions.id"), nullable=False, index=True)
    confirmation_id = Column(String, nullable=False, index=True)
    draft = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    submission = Column(JSON, nullable=False)  # Content matching the form design
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    form_version = relationship("FormVersion", back_populates="submissions")


class SubmissionData(Base):
    """
    Flattened read model of submissions joined with form, version and status.

    Backed by the submissions_data_vw view in deployed databases. Column names
    mirror the view (camelCase) so export column projections map 1:1.
    """

    __tablename__ = "submissions_data"

    submissionId = Column(String, primary_key=True)
    formId = Column(String, nullable=False, index=True)
    formVersionId = Column(String, nullable=False)
    confirmationId = Column(String, nullable=False)
    formName = Column(String, nullable=False)
    version = Column(Integer, nullable=False)
    createdAt = Column(DateTime, nullable=False, index=True)
    fullName = Column(String, nullable=True)
    username = Column(String, nullable=True)
    email = Column(String, nullable=True)
    status = Column(String, nullable=True)
    assignee = Column(String, nullable=True)
    assigneeEmail = Column(String, nullable=True)
    submission = Column(JSON, nullable=True)
    deleted = Column(Boolean, default=False, nullable=False)
    draft = Column(Boolean, default=False, nullable=False)

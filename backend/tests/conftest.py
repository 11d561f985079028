"""
Shared pytest fixtures.

Provides an in-memory database session and a small form with versions,
submissions and user grants.
"""
from datetime import datetime
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chefs.core.database import Base
from factories import FORM_ID, SCHEMA_V1, SCHEMA_V2, submission_row
import chefs.models  # noqa: F401  (registers tables on Base.metadata)


# Test database setup (in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.

    Creates all tables, yields session, then drops all tables.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sample_form(db_session):
    """
    Form with two versions, four visible submissions, one deleted and one draft.

    Returns: Form model instance
    """
    from chefs.models import Form, FormVersion, SubmissionData, UserFormAccess

    form = Form(id=FORM_ID, name="Fishing Licence", enable_status_updates=False)
    db_session.add(form)
    db_session.add(FormVersion(id="v1", form_id=FORM_ID, version=1, schema=SCHEMA_V1, published=True))
    db_session.add(FormVersion(id="v2", form_id=FORM_ID, version=2, schema=SCHEMA_V2, published=True))

    rows = [
        submission_row(1, datetime(2024, 1, 1, 9, 0), version=1, formVersionId="v1"),
        submission_row(2, datetime(2024, 1, 15, 9, 0)),
        submission_row(
            3,
            datetime(2024, 2, 1, 9, 0),
            submission={
                "firstName": "First3",
                "agree": {"yes": True, "no": False},
                "items": [{"name": "rod"}, {"name": "reel"}],
            },
        ),
        submission_row(4, datetime(2024, 3, 1, 9, 0)),
        submission_row(5, datetime(2024, 2, 10, 9, 0), deleted=True),
        submission_row(6, datetime(2024, 2, 20, 9, 0), draft=True),
    ]
    for row in rows:
        db_session.add(SubmissionData(**row))

    db_session.add(UserFormAccess(user_id="reader", form_id=FORM_ID, permission="form_read"))
    db_session.add(UserFormAccess(user_id="reader", form_id=FORM_ID, permission="submission_read"))
    db_session.add(UserFormAccess(user_id="viewer", form_id=FORM_ID, permission="form_read"))
    db_session.add(UserFormAccess(user_id="submitter", form_id=FORM_ID, permission="submission_read"))
    db_session.commit()

    return form

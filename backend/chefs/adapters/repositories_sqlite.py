"""
SQLite implementations of repository interfaces.

Lean stack implementation using SQLAlchemy + SQLite.
Easy migration path to Postgres (same SQLAlchemy API).
"""
from collections import defaultdict
from datetime import datetime
from typing import List, Dict, Any, Optional
from sqlalchemy.orm import Session

from chefs.ports.repositories import FormsRepo, SubmissionsRepo, PermissionsRepo
from chefs.models import Form, FormVersion, SubmissionData, UserFormAccess
from chefs.export.errors import FormNotFoundError, ExportValidationError


class SQLiteFormsRepo(FormsRepo):
    """SQLite implementation of FormsRepo."""

    def __init__(self, db: Session):
        self.db = db

    def get_form(self, form_id: str) -> Form:
        """Get a form by ID."""
        form = self.db.query(Form).filter(Form.id == form_id).first()
        if not form:
            raise FormNotFoundError(f"Form {form_id} not found")
        return form

    def get_latest_schema(self, form_id: str) -> Optional[Dict[str, Any]]:
        """Get the design of the highest form version."""
        row = (
            self.db.query(FormVersion.schema)
            .filter(FormVersion.form_id == form_id)
            .order_by(FormVersion.version.desc())
            .first()
        )
        return row.schema if row else None


class SQLiteSubmissionsRepo(SubmissionsRepo):
    """SQLite implementation of SubmissionsRepo."""

    def __init__(self, db: Session):
        self.db = db

    def list_submissions(
        self,
        form_id: str,
        columns: List[str],
        min_date: Optional[datetime] = None,
        max_date: Optional[datetime] = None,
        deleted: bool = False,
        drafts: bool = False,
    ) -> List[Dict[str, Any]]:
        """List submissions of a form, newest first."""
        table_columns = SubmissionData.__table__.c
        unknown = [c for c in columns if c not in table_columns]
        if unknown:
            raise ExportValidationError(
                f"Could not create an export for this form. Unknown column(s): {', '.join(unknown)}"
            )

        query = self.db.query(*[table_columns[c] for c in columns]).filter(
            SubmissionData.formId == form_id
        )
        query = self._filter_created_at(query, min_date, max_date)

        if not deleted:
            query = query.filter(SubmissionData.deleted.is_(False))
        if not drafts:
            query = query.filter(SubmissionData.draft.is_(False))

        query = query.order_by(SubmissionData.createdAt.desc())

        return [dict(row._mapping) for row in query.all()]

    @staticmethod
    def _filter_created_at(query, min_date: Optional[datetime], max_date: Optional[datetime]):
        """Both bounds → inclusive range; one bound → >= or <=; none → unfiltered."""
        if min_date and max_date:
            return query.filter(SubmissionData.createdAt.between(min_date, max_date))
        if min_date:
            return query.filter(SubmissionData.createdAt >= min_date)
        if max_date:
            return query.filter(SubmissionData.createdAt <= max_date)
        return query


class SQLitePermissionsRepo(PermissionsRepo):
    """SQLite implementation of PermissionsRepo."""

    def __init__(self, db: Session):
        self.db = db

    def get_form_access(self, user_id: str) -> Dict[str, List[str]]:
        """Get the capabilities a user holds, grouped by form."""
        grants = (
            self.db.query(UserFormAccess)
            .filter(UserFormAccess.user_id == user_id)
            .order_by(UserFormAccess.form_id, UserFormAccess.permission)
            .all()
        )

        access: Dict[str, List[str]] = defaultdict(list)
        for grant in grants:
            access[grant.form_id].append(grant.permission)
        return dict(access)

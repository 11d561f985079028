"""
Repository interfaces for data access.

The export core only reads: forms and their designs, the submissions read
model, and per-user form grants. Implementations can be swapped without
changing export logic.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Dict, Any, Optional


class FormsRepo(ABC):
    """Repository for forms and form designs."""

    @abstractmethod
    def get_form(self, form_id: str):
        """
        Get a form by ID.

        Args:
            form_id: ID of the form

        Returns:
            Form instance

        Raises:
            FormNotFoundError: If the form does not exist
        """
        pass

    @abstractmethod
    def get_latest_schema(self, form_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the design of the highest form version.

        Args:
            form_id: ID of the form

        Returns:
            form.io schema dict, or None when the form has no versions
        """
        pass


class SubmissionsRepo(ABC):
    """Repository over the submissions read model."""

    @abstractmethod
    def list_submissions(
        self,
        form_id: str,
        columns: List[str],
        min_date: Optional[datetime] = None,
        max_date: Optional[datetime] = None,
        deleted: bool = False,
        drafts: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        List submissions of a form, newest first.

        Args:
            form_id: ID of the form
            columns: Columns to project (read model names)
            min_date: Lower bound on createdAt (inclusive)
            max_date: Upper bound on createdAt (inclusive)
            deleted: Include soft-deleted submissions
            drafts: Include drafts

        Returns:
            List of row dicts keyed by column name

        Raises:
            ExportValidationError: If a column is not part of the read model
        """
        pass


class PermissionsRepo(ABC):
    """Repository for per-user form grants."""

    @abstractmethod
    def get_form_access(self, user_id: str) -> Dict[str, List[str]]:
        """
        Get the capabilities a user holds, grouped by form.

        Args:
            user_id: ID of the user

        Returns:
            Dict of form_id → list of permission codes
        """
        pass

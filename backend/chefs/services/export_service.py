"""
Export service - orchestrates the submission export pipeline.

Pipeline:
1. Resolve export type and format (unknown values → defaults)
2. Load form (404 if missing)
3. Check the user's submission_read grant on the form
4. Fetch submissions: column projection, date/deleted/draft filters, newest first
5. Reshape: content fields to top level, metadata under "form"
6. Drop excluded content fields
7. Render:
   a. CSV: headers = form.<metadata> + field names of the LATEST form design
   b. JSON: reshaped records as-is
8. Return: data + content-disposition/content-type headers

CSV headers always come from the latest form version, even for submissions
made against older versions; fields no longer in the design are appended
after the designed ones.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from sqlalchemy.orm import Session

from chefs.adapters.repositories_sqlite import SQLiteFormsRepo, SQLiteSubmissionsRepo
from chefs.core.permissions import Permissions
from chefs.export.columns import SUBMISSION_COLUMN, submissions_columns
from chefs.export.csv_emitter import CSVEmitter
from chefs.export.errors import ExportError, ExportRenderError, ExportValidationError
from chefs.export.naming import content_disposition, export_filename
from chefs.export.permissions import check_permission
from chefs.export.reshape import FORM_NAMESPACE, exclude_data, reshape_all
from chefs.export.schema_fields import read_schema_fields
from chefs.export.types import ExportFormat, ExportType
from chefs.ports.repositories import FormsRepo, SubmissionsRepo
from chefs.schemas.export import ExportParams
from chefs.schemas.user import CurrentUser

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Rendered export plus transport headers."""

    data: Union[str, List[Dict[str, Any]]]
    headers: Dict[str, str] = field(default_factory=dict)


class ExportService:
    """
    Export service - orchestrates permission check → fetch → reshape → render.

    Holds no state between exports.
    """

    def __init__(
        self,
        db: Optional[Session],
        forms_repo: Optional[FormsRepo] = None,
        submissions_repo: Optional[SubmissionsRepo] = None,
        csv_emitter: Optional[CSVEmitter] = None,
    ):
        """
        Initialize export service.

        Args:
            db: SQLAlchemy database session
            forms_repo: Override for the forms repository
            submissions_repo: Override for the submissions repository
            csv_emitter: Override for the CSV emitter
        """
        self.db = db
        self.forms_repo = forms_repo or SQLiteFormsRepo(db)
        self.submissions_repo = submissions_repo or SQLiteSubmissionsRepo(db)
        self.csv_emitter = csv_emitter or CSVEmitter()

    def export(
        self,
        form_id: str,
        params: Optional[ExportParams],
        current_user: CurrentUser,
    ) -> ExportResult:
        """
        Export a form's data.

        Args:
            form_id: ID of the form
            params: Export options (None → all defaults)
            current_user: Authenticated principal with form grants

        Returns:
            ExportResult with data and headers

        Raises:
            FormNotFoundError: Form does not exist
            ExportAuthorizationError: User lacks submission_read on the form
            ExportValidationError: Unsupported type/format or unknown columns
            ExportRenderError: CSV serialization failed
        """
        params = params or ExportParams()
        export_type = ExportType.resolve(params.type)
        export_format = ExportFormat.resolve(params.format)

        logger.info(f"Exporting {export_type.value} of form {form_id} as {export_format.value}")

        form = self.forms_repo.get_form(form_id)
        data = self._get_data(export_type, form, params, current_user)
        return self._format_data(export_format, export_type, form, data, params)

    def _get_data(
        self,
        export_type: ExportType,
        form,
        params: ExportParams,
        current_user: CurrentUser,
    ) -> List[Dict[str, Any]]:
        if export_type == ExportType.SUBMISSIONS:
            return self._get_submissions(form, params, current_user)
        return []

    def _get_submissions(
        self, form, params: ExportParams, current_user: CurrentUser
    ) -> List[Dict[str, Any]]:
        check_permission(current_user, form.id, Permissions.SUBMISSION_READ, ExportType.SUBMISSIONS.value)

        rows = self.submissions_repo.list_submissions(
            form.id,
            submissions_columns(form, params),
            min_date=params.min_date,
            max_date=params.max_date,
            deleted=params.deleted,
            drafts=params.drafts,
        )
        logger.info(f"Fetched {len(rows)} submission(s) for form {form.id}")
        return rows

    def _format_data(
        self,
        export_format: ExportFormat,
        export_type: ExportType,
        form,
        rows: List[Dict[str, Any]],
        params: ExportParams,
    ) -> ExportResult:
        # Content first, metadata under "form"
        formatted = exclude_data(params, reshape_all(rows))

        if export_type == ExportType.SUBMISSIONS:
            if export_format == ExportFormat.CSV:
                return self._format_submissions_csv(form, formatted, params)
            if export_format == ExportFormat.JSON:
                return self._format_submissions_json(form, formatted)

        raise ExportValidationError("Could not create an export for this form. Invalid options provided")

    def _format_submissions_json(self, form, data: List[Dict[str, Any]]) -> ExportResult:
        return ExportResult(
            data=data,
            headers=self._headers(form, ExportType.SUBMISSIONS, ExportFormat.JSON),
        )

    def _format_submissions_csv(
        self, form, data: List[Dict[str, Any]], params: ExportParams
    ) -> ExportResult:
        try:
            headers = self._build_csv_headers(form, data, params)
            csv = self.csv_emitter.emit(data, headers)
        except ExportError:
            raise
        except Exception as e:
            logger.error(f"CSV export failed for form {form.id}: {e}")
            raise ExportRenderError(
                f"Could not make a csv export of submissions for this form. {e}"
            ) from e

        return ExportResult(
            data=csv,
            headers=self._headers(form, ExportType.SUBMISSIONS, ExportFormat.CSV),
        )

    def _build_csv_headers(
        self, form, data: List[Dict[str, Any]], params: ExportParams
    ) -> List[str]:
        """
        Metadata headers ("form.<column>") followed by design-ordered field names.

        Submission JSON does not keep key order once stored, so field order is
        read from the latest form design.
        """
        latest_schema = self.forms_repo.get_latest_schema(form.id)
        excluded = set(params.exclude or [])
        field_names = [
            name for name in read_schema_fields(latest_schema)
            if name.split(".", 1)[0] not in excluded
        ]

        if data:
            meta_keys = list(data[0].get(FORM_NAMESPACE, {}).keys())
        else:
            meta_keys = [c for c in submissions_columns(form, params) if c != SUBMISSION_COLUMN]
        meta_headers = [f"{FORM_NAMESPACE}.{key}" for key in meta_keys]

        return meta_headers + field_names

    def _headers(self, form, export_type: ExportType, export_format: ExportFormat) -> Dict[str, str]:
        filename = export_filename(form, export_type.value, export_format.value)
        return {
            "content-disposition": content_disposition(filename),
            "content-type": export_format.content_type,
        }

"""
Form export API endpoints.
"""
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session

from chefs.api.deps import require_form_permissions
from chefs.core.permissions import Permissions
from chefs.core.database import get_db
from chefs.export.errors import ExportError
from chefs.schemas.export import ExportParams
from chefs.schemas.user import CurrentUser
from chefs.services.export_service import ExportService

router = APIRouter()


@router.get("/forms/{form_id}/export")
def export_form(
    form_id: str,
    type: Optional[str] = None,
    format: Optional[str] = None,
    min_date: Optional[datetime] = Query(None, alias="minDate"),
    max_date: Optional[datetime] = Query(None, alias="maxDate"),
    deleted: bool = False,
    drafts: bool = False,
    columns: Optional[List[str]] = Query(None),
    exclude: Optional[List[str]] = Query(None),
    current_user: CurrentUser = Depends(
        require_form_permissions(Permissions.FORM_READ, Permissions.SUBMISSION_READ)
    ),
    db: Session = Depends(get_db),
):
    """
    Export submissions of a form as CSV (default) or JSON.

    Query parameters:
    - type: export target, "submissions" (default; unknown values fall back to it)
    - format: "csv" (default) or "json" (unknown values fall back to csv)
    - minDate / maxDate: createdAt bounds, inclusive
    - deleted / drafts: include soft-deleted submissions / drafts
    - columns: repeatable, replaces the default metadata columns
    - exclude: repeatable, content fields to leave out

    Requires form_read and submission_read on the form.

    Returns the export as an attachment (content-disposition header).
    """
    params = ExportParams(
        type=type,
        format=format,
        min_date=min_date,
        max_date=max_date,
        deleted=deleted,
        drafts=drafts,
        columns=columns,
        exclude=exclude,
    )

    try:
        result = ExportService(db).export(form_id, params, current_user)
    except ExportError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)

    if isinstance(result.data, str):
        return Response(content=result.data, headers=result.headers)
    return JSONResponse(content=jsonable_encoder(result.data), headers=result.headers)

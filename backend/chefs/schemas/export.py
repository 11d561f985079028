"""
Pydantic schemas for the export API.
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ExportParams(BaseModel):
    """
    Export options as received from the client.

    type and format stay raw strings; ExportType/ExportFormat resolve them
    (unknown values fall back to defaults).
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    format: Optional[str] = None
    min_date: Optional[datetime] = Field(default=None, alias="minDate")
    max_date: Optional[datetime] = Field(default=None, alias="maxDate")
    deleted: bool = False
    drafts: bool = False
    columns: Optional[List[str]] = None
    exclude: Optional[List[str]] = None

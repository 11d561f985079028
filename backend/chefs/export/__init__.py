"""
Export module for submission exports (CSV / JSON).
"""
from chefs.export.schema_fields import SchemaNode, read_schema_fields
from chefs.export.columns import submissions_columns
from chefs.export.permissions import check_permission
from chefs.export.reshape import SubmissionRecord, reshape, reshape_all, exclude_data
from chefs.export.naming import slug, export_filename
from chefs.export.types import ExportType, ExportFormat
from chefs.export.csv_emitter import CSVEmitter

__all__ = [
    "SchemaNode",
    "read_schema_fields",
    "submissions_columns",
    "check_permission",
    "SubmissionRecord",
    "reshape",
    "reshape_all",
    "exclude_data",
    "slug",
    "export_filename",
    "ExportType",
    "ExportFormat",
    "CSVEmitter",
]

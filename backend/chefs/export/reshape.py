"""
Record reshaping between the submissions read model and export documents.

Exports put submission content first: content fields move to the top level
and every metadata column is grouped under a "form" key.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from chefs.export.columns import SUBMISSION_COLUMN

FORM_NAMESPACE = "form"


@dataclass
class SubmissionRecord:
    """One fetched submission split into metadata columns and content."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    content: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SubmissionRecord":
        metadata = {k: v for k, v in row.items() if k != SUBMISSION_COLUMN}
        content = row.get(SUBMISSION_COLUMN) or {}
        return cls(metadata=metadata, content=dict(content))


def reshape(record: SubmissionRecord) -> Dict[str, Any]:
    """
    Lift content to the top level and nest metadata under "form".

    A content field literally named "form" is replaced by the metadata group.
    """
    document: Dict[str, Any] = {FORM_NAMESPACE: dict(record.metadata)}
    for key, value in record.content.items():
        if key == FORM_NAMESPACE:
            continue
        document[key] = value
    return document


def exclude_data(params=None, data=None):
    """
    Drop excluded content fields from reshaped records.

    Args:
        params: ExportParams (or None); params.exclude lists top-level content keys
        data: List of reshaped records

    Returns:
        {} when no data is supplied, data untouched when nothing is excluded,
        otherwise new records without the excluded keys. The "form" group is
        never removed.
    """
    if data is None:
        return {}

    excluded = set(getattr(params, "exclude", None) or []) if params else set()
    excluded.discard(FORM_NAMESPACE)
    if not excluded:
        return data

    return [{k: v for k, v in record.items() if k not in excluded} for record in data]


def reshape_all(rows: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Reshape fetched rows in order."""
    return [reshape(SubmissionRecord.from_row(row)) for row in rows]

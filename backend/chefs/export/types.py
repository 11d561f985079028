"""
Export targets and output formats.

Unknown or missing values resolve to the default member instead of failing,
so clients sending values added in later releases still get an export.
"""
import enum
from typing import Optional


class ExportType(str, enum.Enum):
    SUBMISSIONS = "submissions"

    @classmethod
    def default(cls) -> "ExportType":
        return cls.SUBMISSIONS

    @classmethod
    def resolve(cls, value: Optional[str]) -> "ExportType":
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class ExportFormat(str, enum.Enum):
    CSV = "csv"
    JSON = "json"

    @classmethod
    def default(cls) -> "ExportFormat":
        return cls.CSV

    @classmethod
    def resolve(cls, value: Optional[str]) -> "ExportFormat":
        try:
            return cls(value)
        except ValueError:
            return cls.default()

    @property
    def content_type(self) -> str:
        return {
            ExportFormat.CSV: "text/csv",
            ExportFormat.JSON: "text/json",
        }[self]

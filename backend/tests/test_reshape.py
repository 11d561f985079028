"""
Tests for record reshaping and data exclusion.
"""
from datetime import datetime

from chefs.export.reshape import SubmissionRecord, exclude_data, reshape, reshape_all


ROW = {
    "confirmationId": "ABC123",
    "createdAt": datetime(2024, 3, 1, 12, 0),
    "email": "jo@example.com",
    "submission": {"firstName": "Jo", "items": [{"name": "x"}]},
}


def test_from_row_splits_metadata_and_content():
    record = SubmissionRecord.from_row(ROW)

    assert record.metadata == {
        "confirmationId": "ABC123",
        "createdAt": datetime(2024, 3, 1, 12, 0),
        "email": "jo@example.com",
    }
    assert record.content == {"firstName": "Jo", "items": [{"name": "x"}]}


def test_reshape_lifts_content_and_nests_metadata():
    document = reshape(SubmissionRecord.from_row(ROW))

    assert list(document) == ["form", "firstName", "items"]
    assert document["form"]["confirmationId"] == "ABC123"
    assert document["firstName"] == "Jo"


def test_reshape_without_submission_column():
    document = reshape(SubmissionRecord.from_row({"confirmationId": "A"}))

    assert document == {"form": {"confirmationId": "A"}}


def test_reshape_keeps_metadata_over_content_named_form():
    row = {"confirmationId": "A", "submission": {"form": "shadow", "x": 1}}

    assert reshape(SubmissionRecord.from_row(row)) == {"form": {"confirmationId": "A"}, "x": 1}


def test_reshape_all_keeps_order():
    rows = [{"confirmationId": "2", "submission": {}}, {"confirmationId": "1", "submission": {}}]

    assert [d["form"]["confirmationId"] for d in reshape_all(rows)] == ["2", "1"]


class TestExcludeData:
    def test_returns_blank_data_when_nothing_supplied(self):
        assert exclude_data() == {}

    def test_returns_data_when_blank_params_supplied(self):
        data = [{"test": 123}]

        assert exclude_data({}, data) == data
        assert exclude_data(None, data) == data

    def test_returns_data_when_params_without_exclusion(self):
        from chefs.schemas.export import ExportParams

        data = [{"test": 123}]
        assert exclude_data(ExportParams(format="csv"), data) == data

    def test_excludes_listed_fields_but_not_form(self):
        from chefs.schemas.export import ExportParams

        data = [{"form": {"a": 1}, "secret": "s", "keep": "k"}]
        result = exclude_data(ExportParams(exclude=["secret", "form"]), data)

        assert result == [{"form": {"a": 1}, "keep": "k"}]

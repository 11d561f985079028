"""
Tests for schema field extraction.

Validates:
- Document order for flat designs
- Hidden / non-input nodes skipped, their children still visited
- Checkbox option expansion right after the base key
- Datagrid namespacing vs. flattened containers
- Determinism (same design → same list)
"""
import pytest
from chefs.export.schema_fields import SchemaNode, read_schema_fields


def textfield(key, **extra):
    return {"type": "textfield", "key": key, "input": True, **extra}


@pytest.fixture
def nested_schema():
    """Design with panels, columns, a datagrid, a table and checkboxes."""
    return {
        "display": "form",
        "type": "form",
        "components": [
            {
                "type": "panel",
                "key": "applicantPanel",
                "input": False,
                "components": [
                    textfield("firstName"),
                    textfield("lastName"),
                    {
                        "type": "columns",
                        "key": "columns1",
                        "input": False,
                        "columns": [
                            {"components": [textfield("city")], "width": 6},
                            {"components": [textfield("province")], "width": 6},
                        ],
                    },
                ],
            },
            {
                "type": "selectboxes",
                "key": "services",
                "input": True,
                "values": [{"label": "A", "value": "a"}, {"label": "B", "value": "b"}],
            },
            {
                "type": "simplecheckboxes",
                "key": "agree",
                "input": True,
                "values": [{"label": "Yes", "value": "yes"}, {"label": "No", "value": "no"}],
            },
            {
                "type": "datagrid",
                "key": "items",
                "input": True,
                "components": [textfield("name"), textfield("quantity")],
            },
            {
                "type": "table",
                "key": "table1",
                "input": False,
                "rows": [
                    [{"components": [textfield("cellA")]}, {"components": [textfield("cellB")]}],
                ],
            },
            {"type": "button", "key": "submit", "input": True},
        ],
    }


def test_flat_schema_returns_keys_in_order():
    schema = {"components": [textfield("a"), textfield("b"), textfield("c")]}

    assert read_schema_fields(schema) == ["a", "b", "c"]


def test_hidden_and_non_input_nodes_skipped():
    schema = {
        "components": [
            textfield("visible"),
            textfield("secret", hidden=True),
            {"type": "htmlelement", "key": "html1", "input": False},
            {"type": "textfield", "input": True},  # no key
        ]
    }

    assert read_schema_fields(schema) == ["visible"]


def test_children_of_hidden_container_still_visited():
    schema = {
        "components": [
            {
                "type": "container",
                "key": "hiddenBox",
                "input": True,
                "hidden": True,
                "components": [textfield("inner")],
            }
        ]
    }

    assert read_schema_fields(schema) == ["inner"]


def test_checkbox_values_expanded_after_key():
    schema = {
        "components": [
            textfield("before"),
            {
                "type": "checkbox",
                "key": "agree",
                "input": True,
                "values": [{"value": "a"}, {"value": "b"}],
            },
            textfield("after"),
        ]
    }

    assert read_schema_fields(schema) == ["before", "agree", "agree.a", "agree.b", "after"]


def test_checkbox_without_values_only_key():
    schema = {"components": [{"type": "checkbox", "key": "ok", "input": True}]}

    assert read_schema_fields(schema) == ["ok"]


def test_datagrid_children_prefixed():
    schema = {
        "components": [
            {"type": "datagrid", "key": "items", "input": True, "components": [textfield("name")]}
        ]
    }

    assert read_schema_fields(schema) == ["items", "items.name"]


def test_container_children_not_prefixed():
    schema = {
        "components": [
            {"type": "panel", "key": "section", "input": False, "components": [textfield("name")]}
        ]
    }

    assert read_schema_fields(schema) == ["name"]


def test_nested_datagrids_prefix_each_level():
    schema = {
        "components": [
            {
                "type": "datagrid",
                "key": "outer",
                "input": True,
                "components": [
                    {"type": "datagrid", "key": "inner", "input": True, "components": [textfield("x")]}
                ],
            }
        ]
    }

    assert read_schema_fields(schema) == ["outer", "outer.inner", "outer.inner.x"]


def test_nested_schema_full_order(nested_schema):
    assert read_schema_fields(nested_schema) == [
        "firstName",
        "lastName",
        "city",
        "province",
        "services",
        "agree",
        "agree.yes",
        "agree.no",
        "items",
        "items.name",
        "items.quantity",
        "cellA",
        "cellB",
        "submit",
    ]


def test_selectboxes_is_not_checkbox_family():
    node = SchemaNode.from_dict({"type": "selectboxes", "key": "s", "input": True})
    assert node.is_checkbox is False
    assert SchemaNode.from_dict({"type": "simplecheckboxes"}).is_checkbox is True


def test_deterministic(nested_schema):
    assert read_schema_fields(nested_schema) == read_schema_fields(nested_schema)


def test_accepts_schema_node(nested_schema):
    node = SchemaNode.from_dict(nested_schema)

    assert read_schema_fields(node) == read_schema_fields(nested_schema)


def test_from_dict_builds_child_collections():
    node = SchemaNode.from_dict({
        "type": "columns",
        "columns": [{"components": [textfield("a")]}],
        "tags": ["x", "y"],
        "values": [{"value": "v"}],
    })

    assert list(node.children) == ["columns"]
    assert node.children["columns"][0].children["components"][0].key == "a"
    assert node.values == [{"value": "v"}]


def test_empty_or_missing_schema():
    assert read_schema_fields(None) == []
    assert read_schema_fields({}) == []

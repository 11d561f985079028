"""
Schema field extraction - ordered export field names from a form.io design.

Submission JSON is stored in a document column that does not preserve key
order, so CSV column order is taken from the form design instead:

- Depth-first, document order
- A node contributes its key when it has one, is an input and is not hidden
- Checkbox-family nodes with enumerated values also contribute "<key>.<value>"
  per option, right after the base key
- Children of datagrid-family nodes are namespaced as "<key>.<child>";
  children of every other container are flattened into the parent namespace

The schema is assumed to be a finite tree (no cycles).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

CHECKBOX_FAMILY = "checkbox"
DATAGRID_FAMILY = "datagrid"


@dataclass
class SchemaNode:
    """One node of a form.io design tree."""

    key: Optional[str] = None
    input: bool = False
    hidden: bool = False
    type: Optional[str] = None
    values: List[Any] = field(default_factory=list)
    children: Dict[str, List["SchemaNode"]] = field(default_factory=dict)

    @property
    def is_checkbox(self) -> bool:
        return bool(self.type) and CHECKBOX_FAMILY in self.type

    @property
    def is_datagrid(self) -> bool:
        return bool(self.type) and DATAGRID_FAMILY in self.type

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "SchemaNode":
        """
        Build a node tree from a raw form.io document.

        Every list-valued property holding objects becomes a child collection,
        keeping property order. Lists nested inside lists (table rows are
        lists of cells) are walked so their objects keep document order.
        """
        children: Dict[str, List[SchemaNode]] = {}
        for prop, value in obj.items():
            if prop == "values" or not isinstance(value, list):
                continue
            nodes = [cls.from_dict(item) for item in _iter_objects(value)]
            if nodes:
                children[prop] = nodes

        return cls(
            key=obj.get("key") or None,
            input=bool(obj.get("input")),
            hidden=bool(obj.get("hidden")),
            type=obj.get("type"),
            values=list(obj.get("values") or []),
            children=children,
        )


def _iter_objects(items: List[Any]):
    for item in items:
        if isinstance(item, dict):
            yield item
        elif isinstance(item, list):
            yield from _iter_objects(item)


def _option_value(option: Any) -> Any:
    if isinstance(option, dict):
        return option.get("value")
    return option


def _find_fields(node: SchemaNode) -> List[str]:
    fields: List[str] = []

    if node.key and node.input and not node.hidden:
        fields.append(node.key)
        if node.is_checkbox:
            fields.extend(f"{node.key}.{_option_value(option)}" for option in node.values)

    for collection in node.children.values():
        for child in collection:
            child_fields = _find_fields(child)
            if node.is_datagrid and node.key:
                child_fields = [f"{node.key}.{name}" for name in child_fields]
            fields.extend(child_fields)

    return fields


def read_schema_fields(schema: Union[SchemaNode, Dict[str, Any]]) -> List[str]:
    """
    Return the flattened, ordered content field names of a form design.

    Args:
        schema: SchemaNode tree or raw form.io schema dict

    Returns:
        Field names in design order, e.g. ["firstName", "agree", "agree.yes",
        "items.name"]
    """
    if schema is None:
        return []
    if not isinstance(schema, SchemaNode):
        schema = SchemaNode.from_dict(schema)
    return _find_fields(schema)

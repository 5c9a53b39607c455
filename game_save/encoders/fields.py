from pydantic import BaseModel, ConfigDict


class FieldRule(BaseModel):
    """
    How one model field is rendered by one encoder.

    name:      key (JSON) or tag/attribute name (XML) written for the field
    included:  False drops the field from the output entirely
    attribute: XML only, render as an attribute of the parent element instead of a child
    item_tag:  XML only, tag of each repeated element inside a list container
    sequence:  JSON only, the value is an array of nested records rather than a single one
    children:  rules for the fields of a nested record (or of each list item)
    """
    model_config = ConfigDict(frozen=True)

    name: str
    included: bool = True
    attribute: bool = False
    item_tag: str | None = None
    sequence: bool = False
    children: dict[str, "FieldRule"] | None = None


def included_fields(rules: dict[str, FieldRule]) -> list[tuple[str, FieldRule]]:
    return [(field_name, rule) for field_name, rule in rules.items() if rule.included]

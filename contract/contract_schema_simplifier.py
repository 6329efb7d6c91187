from typing import Any, Dict, Optional

from contract.contract_canonicalizer import canonicalize

# Keys that affect how a schema validates; everything else is documentation.
SCHEMA_KEYS = (
    "type",
    "format",
    "enum",
    "nullable",
    "items",
    "oneOf",
    "anyOf",
    "allOf",
    "properties",
    "required",
)

COMPOSITION_KEYS = ("oneOf", "anyOf", "allOf")


def simplify_schema(schema: Any, sort_unordered: bool = False) -> Optional[Any]:
    """
    Project a JSON Schema object onto the keys listed in SCHEMA_KEYS.

    A schema carrying ``$ref`` is reduced to ``{"$ref": ...}`` and nothing
    else on it is looked at. Nested schemas under ``items``, ``properties``
    and the composition keywords are simplified the same way, so the same
    subset survives at every depth.

    Non-object schemas (the boolean ``true``/``false`` forms) are returned
    unchanged. ``None`` stays ``None``.

    Args:
        schema: The raw schema value from the document.
        sort_unordered: Sort ``required`` and ``enum`` so their order does not
            register as a change.

    Returns:
        The simplified schema.
    """
    if schema is None:
        return None
    if not isinstance(schema, dict):
        return schema
    if "$ref" in schema:
        return {"$ref": schema["$ref"]}

    simplified: Dict[str, Any] = {}
    for key in SCHEMA_KEYS:
        if key not in schema:
            continue
        value = schema[key]

        if key == "items":
            if isinstance(value, list):
                value = [simplify_schema(item, sort_unordered) for item in value]
            else:
                value = simplify_schema(value, sort_unordered)
        elif key == "properties" and isinstance(value, dict):
            value = {name: simplify_schema(prop, sort_unordered) for name, prop in value.items()}
        elif key in COMPOSITION_KEYS and isinstance(value, list):
            value = [simplify_schema(entry, sort_unordered) for entry in value]
        elif sort_unordered and key == "required" and isinstance(value, list):
            value = sorted(value, key=str)
        elif sort_unordered and key == "enum" and isinstance(value, list):
            value = sorted(value, key=canonicalize)

        simplified[key] = value

    return simplified


def simplify_content(content: Any, sort_unordered: bool = False) -> Dict[str, Dict[str, Any]]:
    """Simplify a media-type map to ``{media_type: {"schema": ...}}`` in sorted order."""
    if not isinstance(content, dict):
        return {}

    simplified = {}
    for media_type in sorted(content):
        media = content[media_type]
        schema = media.get("schema") if isinstance(media, dict) else None
        simplified[media_type] = {"schema": simplify_schema(schema, sort_unordered)}
    return simplified

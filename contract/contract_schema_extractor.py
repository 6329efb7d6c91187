from typing import Any, Dict

from contract.contract_schema_simplifier import simplify_schema


def extract_schemas(doc: Dict[str, Any], sort_unordered: bool = False) -> Dict[str, Any]:
    """Map each name under ``components.schemas`` to its simplified schema."""
    components = doc.get("components") if isinstance(doc, dict) else None
    schemas = components.get("schemas") if isinstance(components, dict) else None
    if not isinstance(schemas, dict):
        return {}

    return {name: simplify_schema(schemas[name], sort_unordered) for name in sorted(schemas)}

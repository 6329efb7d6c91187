from typing import Any, Dict, List, Optional

from contract.contract_diff_types import HTTP_METHODS, OperationSignature, operation_key
from contract.contract_schema_simplifier import simplify_content, simplify_schema


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def simplify_parameters(params: List[Any], sort_unordered: bool = False) -> List[Any]:
    simplified = []
    for param in params:
        if not isinstance(param, dict):
            simplified.append(param)
        elif "$ref" in param:
            simplified.append({"$ref": param["$ref"]})
        else:
            simplified.append({
                "name": param.get("name"),
                "in": param.get("in"),
                "required": bool(param.get("required")),
                "schema": simplify_schema(param.get("schema"), sort_unordered),
            })
    return simplified


def simplify_request_body(request_body: Any, sort_unordered: bool = False) -> Optional[Dict[str, Any]]:
    if not isinstance(request_body, dict):
        return None
    if "$ref" in request_body:
        return {"$ref": request_body["$ref"]}
    return {
        "required": bool(request_body.get("required")),
        "content": simplify_content(request_body.get("content"), sort_unordered),
    }


def simplify_responses(responses: Any, sort_unordered: bool = False) -> Dict[str, Any]:
    """Simplify a responses map; the mandatory ``description`` is not part of the result."""
    if not isinstance(responses, dict):
        return {}

    simplified = {}
    for code in sorted(responses):
        response = responses[code]
        if not isinstance(response, dict):
            continue
        if "$ref" in response:
            simplified[code] = {"$ref": response["$ref"]}
            continue
        content = response.get("content")
        simplified[code] = {"content": simplify_content(content, sort_unordered)}
    return simplified


def build_signature(path_item: Dict[str, Any], operation: Any, sort_unordered: bool = False) -> OperationSignature:
    """Build the signature of one operation, inheriting the path item's shared parameters."""
    if not isinstance(operation, dict):
        operation = {}

    tags = operation.get("tags")
    params = _as_list(path_item.get("parameters")) + _as_list(operation.get("parameters"))

    return OperationSignature(
        operation_id=operation.get("operationId") or None,
        tags=sorted(tags, key=str) if isinstance(tags, list) else [],
        parameters=simplify_parameters(params, sort_unordered),
        request_body=simplify_request_body(operation.get("requestBody"), sort_unordered),
        responses=simplify_responses(operation.get("responses"), sort_unordered),
    )


def extract_operations(doc: Dict[str, Any], sort_unordered: bool = False) -> Dict[str, OperationSignature]:
    """
    Collect one signature per (method, path) defined under ``paths``.

    An empty operation object still gets an entry; methods that are absent
    or not objects produce none. A missing ``paths`` object yields an
    empty map.
    """
    paths = doc.get("paths") if isinstance(doc, dict) else None
    if not isinstance(paths, dict):
        return {}

    operations: Dict[str, OperationSignature] = {}
    for path in sorted(paths):
        path_item = paths[path]
        if not isinstance(path_item, dict):
            continue

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            operations[operation_key(method, path)] = build_signature(path_item, operation, sort_unordered)

    return operations

import json
from typing import Any, Dict, Optional

from contract.contract_diff_types import ContractDiff, DiffResult


def _export_result(result: DiffResult, limit: Optional[int]) -> Dict[str, Any]:
    exported: Dict[str, Any] = {}
    for name in ("added", "removed", "changed"):
        items = getattr(result, name)
        exported[name] = items if limit is None else items[:limit]
    if result.details:
        exported["details"] = {key: result.details[key] for key in exported["changed"] if key in result.details}
    return exported


def export_diff_as_json(diff: ContractDiff, before_path: str, after_path: str,
                        limit: Optional[int] = None) -> Dict[str, Any]:
    """
    Build a machine-readable view of a diff.

    Counts in ``summary`` always reflect the full lists, even when ``limit``
    truncates the exported entries.
    """
    return {
        "before": before_path,
        "after": after_path,
        "summary": {
            "operations": diff.operations.counts(),
            "schemas": diff.schemas.counts(),
            "has_differences": not diff.is_empty,
        },
        "operations": _export_result(diff.operations, limit),
        "schemas": _export_result(diff.schemas, limit),
    }


def render_json_report(diff: ContractDiff, before_path: str, after_path: str,
                       limit: Optional[int] = None) -> str:
    return json.dumps(export_diff_as_json(diff, before_path, after_path, limit), indent=2) + "\n"

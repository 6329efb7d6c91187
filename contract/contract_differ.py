import logging
from typing import Any, Dict, Iterable, List, Mapping

import jsonpatch

from contract.contract_canonicalizer import canonicalize
from contract.contract_diff_types import ContractDiff, DiffResult
from contract.contract_operation_extractor import extract_operations
from contract.contract_schema_extractor import extract_schemas

logger = logging.getLogger(__name__)


def to_json_value(signature: Any) -> Any:
    """Return the plain JSON form of a signature map value."""
    if hasattr(signature, "to_dict"):
        return signature.to_dict()
    return signature


def diff_signature_maps(before: Mapping[str, Any], after: Mapping[str, Any]) -> DiffResult:
    """
    Compare two signature maps of the same shape.

    Returns:
        DiffResult whose ``added`` holds keys only in ``after``, ``removed``
        keys only in ``before`` and ``changed`` keys present in both whose
        canonical forms differ. All three lists are sorted.
    """
    added = sorted(key for key in after if key not in before)
    removed = sorted(key for key in before if key not in after)
    changed = sorted(
        key for key in before
        if key in after and canonicalize(to_json_value(before[key])) != canonicalize(to_json_value(after[key]))
    )
    return DiffResult(added=added, removed=removed, changed=changed)


def explain_changes(before: Mapping[str, Any], after: Mapping[str, Any],
                    keys: Iterable[str]) -> Dict[str, List[Dict[str, Any]]]:
    """Describe each changed key as the JSON Patch turning its before signature into the after one."""
    details = {}
    for key in keys:
        patch = jsonpatch.make_patch(to_json_value(before[key]), to_json_value(after[key]))
        details[key] = list(patch)
    return details


class ContractDiffer:
    """
    Compares two OpenAPI documents by operation and component schema signatures.
    """

    def __init__(self, before_doc: Dict[str, Any], after_doc: Dict[str, Any],
                 sort_unordered: bool = False, explain: bool = False):
        self.before_doc = before_doc
        self.after_doc = after_doc
        self.sort_unordered = sort_unordered
        self.explain = explain

    def diff_operations(self) -> DiffResult:
        before_ops = extract_operations(self.before_doc, self.sort_unordered)
        after_ops = extract_operations(self.after_doc, self.sort_unordered)
        logger.debug(f"Extracted {len(before_ops)} operation(s) before, {len(after_ops)} after")
        return self._diff(before_ops, after_ops)

    def diff_schemas(self) -> DiffResult:
        before_schemas = extract_schemas(self.before_doc, self.sort_unordered)
        after_schemas = extract_schemas(self.after_doc, self.sort_unordered)
        logger.debug(f"Extracted {len(before_schemas)} schema(s) before, {len(after_schemas)} after")
        return self._diff(before_schemas, after_schemas)

    def compute_diff(self) -> ContractDiff:
        result = ContractDiff(operations=self.diff_operations(), schemas=self.diff_schemas())
        logger.debug(f"Operations {result.operations.counts()}, schemas {result.schemas.counts()}")
        return result

    def _diff(self, before: Mapping[str, Any], after: Mapping[str, Any]) -> DiffResult:
        result = diff_signature_maps(before, after)
        if self.explain and result.changed:
            result.details = explain_changes(before, after, result.changed)
        return result

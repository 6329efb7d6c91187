from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "options", "head", "trace")


def operation_key(method: str, path: str) -> str:
    """Build the ``"METHOD path"`` key used to identify an operation."""
    return f"{method.upper()} {path}"


@dataclass(frozen=True)
class OperationSignature:
    """The comparable part of a single OpenAPI operation."""
    operation_id: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    parameters: List[Any] = field(default_factory=list)
    request_body: Optional[Dict[str, Any]] = None
    responses: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operationId": self.operation_id,
            "tags": list(self.tags),
            "parameters": list(self.parameters),
            "requestBody": self.request_body,
            "responses": dict(self.responses),
        }


@dataclass
class DiffResult:
    """Keys added, removed and changed between two signature maps."""
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    details: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)

    @property
    def is_different(self) -> bool:
        return bool(self.added or self.removed or self.changed)

    def counts(self) -> Dict[str, int]:
        return {
            "added": len(self.added),
            "removed": len(self.removed),
            "changed": len(self.changed),
        }


@dataclass
class ContractDiff:
    """Operation and schema differences between two OpenAPI documents."""
    operations: DiffResult = field(default_factory=DiffResult)
    schemas: DiffResult = field(default_factory=DiffResult)

    @property
    def is_empty(self) -> bool:
        return not (self.operations.is_different or self.schemas.is_different)

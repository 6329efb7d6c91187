import json
from typing import Any, Dict, List, Optional

from colorama import Fore, Style, just_fix_windows_console

from contract.contract_diff_types import ContractDiff
from core.diff_config import DEFAULT_LIMIT

HEADER = "=== OpenAPI diff summary ==="
NO_DIFFERENCES = "No differences detected (based on operations + component schemas)."


def _colored(text: str, color: str, use_color: bool) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if use_color else text


def format_patch_operation(operation: Dict[str, Any]) -> str:
    """One JSON Patch operation as a single line, e.g. ``replace /responses/200 = {...}``."""
    line = f"{operation.get('op')} "
    if "from" in operation:
        line += f"{operation['from']} -> "
    line += operation.get("path") or "/"
    if "value" in operation:
        line += f" = {json.dumps(operation['value'], sort_keys=True)}"
    return line


def format_section(title: str, items: List[str], limit: int, color: str = "",
                   use_color: bool = False,
                   details: Optional[Dict[str, List[Dict[str, Any]]]] = None) -> List[str]:
    if not items:
        return []

    lines = [_colored(title, color, use_color)]
    shown = items[:limit]
    for item in shown:
        lines.append(f"  - {item}")
        for operation in (details or {}).get(item, []):
            lines.append(f"      {format_patch_operation(operation)}")
    if len(items) > len(shown):
        lines.append(f"  ... and {len(items) - len(shown)} more")
    lines.append("")
    return lines


def _section_specs(diff: ContractDiff):
    ops = diff.operations
    schemas = diff.schemas
    return [
        ("Added operations:", ops.added, Fore.GREEN, None),
        ("Removed operations:", ops.removed, Fore.RED, None),
        ("Changed operations (signature changed):", ops.changed, Fore.YELLOW, ops.details),
        ("Added schemas:", schemas.added, Fore.GREEN, None),
        ("Removed schemas:", schemas.removed, Fore.RED, None),
        ("Changed schemas:", schemas.changed, Fore.YELLOW, schemas.details),
    ]


def render_text_report(diff: ContractDiff, limit: int = DEFAULT_LIMIT,
                       show_details: bool = False, use_color: bool = False) -> str:
    """
    Render the diff as the human-readable summary report.

    Args:
        diff: Operation and schema differences.
        limit: Maximum entries listed per section before truncating.
        show_details: List the JSON Patch operations under each changed entry.
        use_color: Colorize section titles with ANSI codes.

    Returns:
        The report text, one line per list entry.
    """
    if use_color:
        just_fix_windows_console()
    ops, schemas = diff.operations, diff.schemas
    lines = [
        _colored(HEADER, Fore.CYAN, use_color),
        f"Operations: +{len(ops.added)}  -{len(ops.removed)}  ~{len(ops.changed)}",
        f"Schemas:    +{len(schemas.added)}  -{len(schemas.removed)}  ~{len(schemas.changed)}",
        "",
    ]

    if diff.is_empty:
        lines.append(NO_DIFFERENCES)
        return "\n".join(lines) + "\n"

    for title, items, color, details in _section_specs(diff):
        lines.extend(format_section(title, items, limit, color, use_color, details if show_details else None))

    return "\n".join(lines) + "\n"

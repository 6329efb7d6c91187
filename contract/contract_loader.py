import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from core.exceptions import ContractLoadError

logger = logging.getLogger(__name__)


class ContractLoader:
    """Loads OpenAPI 3.1 JSON documents from disk or from text."""

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
        file_path = Path(file_path)
        if not file_path.is_file():
            raise ContractLoadError("OpenAPI document not found", str(file_path))

        try:
            raw = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContractLoadError("Failed to read OpenAPI document", str(file_path), e)

        document = ContractLoader.load_from_text(raw, file_path)
        paths = document.get("paths")
        logger.info(f"Loaded {file_path} ({len(paths) if isinstance(paths, dict) else 0} path(s))")
        return document

    @staticmethod
    def load_from_text(raw: str, source: Union[str, Path, None] = None) -> Dict[str, Any]:
        source_str = str(source) if source else "text"

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ContractLoadError("Failed to parse JSON", source_str, e)

        if not isinstance(document, dict):
            raise ContractLoadError("OpenAPI document must be a JSON object", source_str)

        return document

from typing import Any, Optional


class ContractLoadError(Exception):
    """Raised when an OpenAPI document cannot be read or parsed."""

    def __init__(self, message: str, file_path: Optional[str] = None, details: Optional[Any] = None):
        self.message = message
        self.file_path = file_path
        self.details = details
        full_message = f"{message}"
        if file_path:
            full_message += f" [File: {file_path}]"
        if details:
            full_message += f"\nDetails:\n{details}"
        super().__init__(full_message)


class DiffConfigError(Exception):
    """Raised when the diff configuration file is missing or invalid."""
    pass

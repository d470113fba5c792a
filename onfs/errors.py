"""
Exception types for onfs.

Every failure is terminal: the CLI reports the message and exits with code 1.
"""

from typing import List, Optional


class OnfsError(RuntimeError):
    """Base class for onfs failures."""


class TemplateParseError(OnfsError):
    """Raised when the manifest template text cannot be parsed."""


class RenderError(OnfsError):
    """Raised when a template placeholder has no matching record field."""


class FileCreateError(OnfsError):
    """Raised when the output manifest cannot be written."""


class InvalidApplicationName(OnfsError, ValueError):
    """Raised when an application name breaks Kubernetes naming rules."""

    def __init__(self, name: str, problems: Optional[List[str]] = None):
        self.name = name
        self.problems = problems or []
        details = "; ".join(self.problems) or "invalid name"
        super().__init__(f"invalid application name '{name}': {details}")


class ManifestParseError(OnfsError):
    """Raised when rendered manifest text is not valid YAML."""

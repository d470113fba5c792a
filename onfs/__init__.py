"""
onfs - CLI tool for running an NFS server on top of OpenEBS

Generates a provisioner Deployment, RBAC objects, an NFS StorageClass and
PersistentVolumeClaims for one application in a single manifest.
"""

__version__ = "0.1.0"

from .types import (
    AccessMode,
    ManifestParams,
    ManifestParameterRecord,
    validate_app_name,
)

from .errors import (
    OnfsError,
    TemplateParseError,
    RenderError,
    FileCreateError,
    InvalidApplicationName,
    ManifestParseError,
)

from .naming import (
    derive,
    derive_from_params,
    format_size,
    inflate_size,
)

from .renderer import (
    load_template,
    render,
    manifest_path,
    write_manifest,
    list_resources,
    generate,
)

__all__ = [
    # Types
    "AccessMode",
    "ManifestParams",
    "ManifestParameterRecord",
    "validate_app_name",
    # Errors
    "OnfsError",
    "TemplateParseError",
    "RenderError",
    "FileCreateError",
    "InvalidApplicationName",
    "ManifestParseError",
    # Naming
    "derive",
    "derive_from_params",
    "format_size",
    "inflate_size",
    # Rendering
    "load_template",
    "render",
    "manifest_path",
    "write_manifest",
    "list_resources",
    "generate",
]

"""
Manifest rendering for onfs.

Substitutes a ManifestParameterRecord into the fixed manifest template and
writes the result to {app}-nfs.yaml.
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml
from jinja2 import (
    Environment,
    StrictUndefined,
    Template,
    TemplateSyntaxError,
    UndefinedError,
    meta,
)

from .errors import FileCreateError, ManifestParseError, RenderError, TemplateParseError
from .naming import derive_from_params
from .template import MANIFEST_TEMPLATE
from .types import ManifestParameterRecord, ManifestParams

logger = logging.getLogger(__name__)

RECORD_FIELDS = frozenset(f.name for f in fields(ManifestParameterRecord))


def _environment() -> Environment:
    return Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def load_template(source: str = MANIFEST_TEMPLATE) -> Template:
    """
    Parse a manifest template and check its placeholders.

    Every placeholder must name a ManifestParameterRecord field, so a mismatch
    is caught before anything is rendered or written.

    Args:
        source: Template text

    Returns:
        Compiled Jinja2 template

    Raises:
        TemplateParseError: If the template text is malformed
        RenderError: If a placeholder has no matching record field
    """
    env = _environment()
    try:
        ast = env.parse(source)
    except TemplateSyntaxError as e:
        raise TemplateParseError(f"template line {e.lineno}: {e.message}") from e

    unknown = meta.find_undeclared_variables(ast) - RECORD_FIELDS
    if unknown:
        raise RenderError(
            f"template references unknown fields: {', '.join(sorted(unknown))}"
        )

    return env.from_string(ast)


def render(
    record: ManifestParameterRecord,
    template: Optional[Template] = None,
) -> str:
    """
    Render the manifest for a parameter record.

    Args:
        record: Derived names and sizes
        template: Template from load_template (default: the built-in manifest)

    Returns:
        Multi-document YAML text

    Raises:
        RenderError: If a placeholder cannot be resolved
    """
    if template is None:
        template = load_template()

    try:
        return template.render(**record.to_context())
    except UndefinedError as e:
        raise RenderError(f"cannot render manifest: {e.message}") from e


def manifest_path(app_name: str, output_dir: Union[str, Path] = ".") -> Path:
    """Output path for an application's manifest."""
    return Path(output_dir) / f"{app_name}-nfs.yaml"


def write_manifest(text: str, path: Union[str, Path]) -> Path:
    """
    Write rendered manifest text, replacing any existing file.

    Raises:
        FileCreateError: If the file cannot be written
    """
    out_file = Path(path)
    try:
        out_file.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileCreateError(f"cannot write {out_file}: {e}") from e

    logger.debug(f"Wrote {len(text)} bytes to {out_file}")
    return out_file


def list_resources(text: str) -> List[Tuple[str, str]]:
    """List (kind, name) for each document in rendered manifest text."""
    resources = []
    try:
        for doc in yaml.safe_load_all(text):
            if not doc:
                continue
            resources.append((doc["kind"], doc["metadata"]["name"]))
    except yaml.YAMLError as e:
        raise ManifestParseError(f"rendered manifest is not valid YAML: {e}") from e
    return resources


def generate(
    params: ManifestParams,
    output_dir: Union[str, Path] = ".",
    template: Optional[Template] = None,
) -> Path:
    """
    Derive, render and write the manifest for one application.

    The manifest is rendered in full before the output file is opened.

    Args:
        params: Command-line parameters
        output_dir: Directory receiving {app}-nfs.yaml
        template: Template from load_template (default: the built-in manifest)

    Returns:
        Path of the written manifest
    """
    if template is None:
        template = load_template()

    record = derive_from_params(params)
    text = render(record, template)
    return write_manifest(text, manifest_path(params.app_name, output_dir))

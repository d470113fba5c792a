"""
CLI for onfs - NFS provisioner manifests on top of OpenEBS.

Writes {appname}-nfs.yaml with the provisioner Deployment, its RBAC objects,
an NFS StorageClass and the backing and application PersistentVolumeClaims.
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from . import __version__
from .errors import InvalidApplicationName, OnfsError
from .naming import derive_from_params
from .renderer import generate, list_resources, load_template, render
from .types import (
    DEFAULT_OPENEBS_STORAGE_CLASS,
    DEFAULT_STORAGE_SIZE,
    ManifestParams,
    validate_app_name,
)


def positive_size(value: str) -> float:
    """argparse type for a storage size in GiB."""
    try:
        size = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: '{value}'")
    if not math.isfinite(size) or size <= 0:
        raise argparse.ArgumentTypeError(f"size must be a positive number: '{value}'")
    return size


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="onfs",
        description="Generate preconfigured manifests to run an NFS server on top of OpenEBS",
    )
    parser.add_argument(
        "-a", "--appname",
        required=True,
        help="Name of the application that has to be deployed on NFS",
    )
    parser.add_argument(
        "-s", "--size",
        type=positive_size,
        default=DEFAULT_STORAGE_SIZE,
        help=f"Storage size needed in G (default: {DEFAULT_STORAGE_SIZE:g})",
    )
    parser.add_argument(
        "-c", "--openebsstorageclass",
        default=DEFAULT_OPENEBS_STORAGE_CLASS,
        help=f"StorageClass of OpenEBS (default: {DEFAULT_OPENEBS_STORAGE_CLASS})",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=".",
        help="Directory to write {appname}-nfs.yaml into (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the manifest to stdout instead of writing it",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Do not check the application name against Kubernetes naming rules",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def params_from_args(args: argparse.Namespace) -> ManifestParams:
    """Build ManifestParams from parsed arguments."""
    params = ManifestParams(
        app_name=args.appname,
        size=args.size,
        openebs_storage_class=args.openebsstorageclass,
    )

    if not params.app_name:
        raise InvalidApplicationName(params.app_name, ["name must not be empty"])

    if not args.skip_validation:
        problems = validate_app_name(params.app_name)
        if problems:
            raise InvalidApplicationName(params.app_name, problems)

    return params


def run(args: argparse.Namespace) -> int:
    """Generate the manifest described by parsed arguments."""
    try:
        params = params_from_args(args)
        template = load_template()

        if args.dry_run:
            print(render(derive_from_params(params), template), end="")
            return 0

        out_file = generate(params, args.output_dir, template)
        if args.verbose:
            resources = list_resources(out_file.read_text(encoding="utf-8"))
    except OnfsError as e:
        print(f"Error: {e}")
        return 1

    if args.verbose:
        print(f"Written: {out_file}", file=sys.stderr)
        for kind, name in resources:
            print(f"  {kind:<22} {name}", file=sys.stderr)
        print(f"Generated {len(resources)} manifests for {params.app_name}", file=sys.stderr)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help and --version exit cleanly, argument errors exit with 1
        return 0 if not e.code else 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

"""
Name and size derivation for the NFS provisioner manifest.

Every resource name is the application name joined with a fixed suffix, so
two applications never share a provisioner, role or claim.
"""

import logging

from .types import (
    DEFAULT_OPENEBS_STORAGE_CLASS,
    DEFAULT_STORAGE_SIZE,
    HEADROOM_RATIO,
    NFS_CLUSTER_ROLE_BINDING_SUFFIX,
    NFS_CLUSTER_ROLE_SUFFIX,
    NFS_PVC_SUFFIX,
    NFS_ROLE_SUFFIX,
    NFS_STORAGE_CLASS_SUFFIX,
    OPENEBS_PVC_SUFFIX,
    PROVISIONER_STATEFUL_SUFFIX,
    PROVISIONER_SUFFIX,
    AccessMode,
    ManifestParameterRecord,
    ManifestParams,
)

logger = logging.getLogger(__name__)


def format_size(size: float) -> str:
    """Format a GiB amount as a storage quantity, e.g. 5 -> '5.00G'."""
    return f"{size:.2f}G"


def inflate_size(size: float) -> float:
    """Add filesystem headroom to a requested size."""
    return size + HEADROOM_RATIO * size


def derive(
    application_name: str,
    requested_size: float = DEFAULT_STORAGE_SIZE,
    backing_storage_class: str = DEFAULT_OPENEBS_STORAGE_CLASS,
) -> ManifestParameterRecord:
    """
    Derive every resource name and size for an application.

    The application name is used verbatim; callers wanting Kubernetes naming
    checks run validate_app_name first.

    Args:
        application_name: Name of the application served by the NFS export
        requested_size: Size of the NFS claim in GiB
        backing_storage_class: StorageClass for the volume behind the export

    Returns:
        Fully populated ManifestParameterRecord
    """
    app = application_name

    record = ManifestParameterRecord(
        application_name=app,
        provisioner_stateful_name=f"{app}-{PROVISIONER_STATEFUL_SUFFIX}",
        nfs_cluster_role_name=f"{app}-{NFS_CLUSTER_ROLE_SUFFIX}",
        nfs_cluster_role_binding_name=f"{app}-{NFS_CLUSTER_ROLE_BINDING_SUFFIX}",
        nfs_role_name=f"{app}-{NFS_ROLE_SUFFIX}",
        provisioner_name=f"{app}{PROVISIONER_SUFFIX}",
        openebs_pvc_name=f"{app}{OPENEBS_PVC_SUFFIX}",
        nfs_storage_class=f"{app}-{NFS_STORAGE_CLASS_SUFFIX}",
        nfs_pvc_name=f"{app}-{NFS_PVC_SUFFIX}",
        openebs_storage_class=backing_storage_class,
        nfs_access_mode=AccessMode.READ_WRITE_MANY,
        requested_storage_size=requested_size,
        nfs_storage_size=format_size(requested_size),
        openebs_storage_size=format_size(inflate_size(requested_size)),
    )

    logger.debug(
        f"Derived names for {app}: provisioner={record.provisioner_stateful_name}, "
        f"nfs_pvc={record.nfs_pvc_name}, backing_pvc={record.openebs_pvc_name} "
        f"({record.nfs_storage_size} on {record.openebs_storage_size})"
    )
    return record


def derive_from_params(params: ManifestParams) -> ManifestParameterRecord:
    """Derive a record from command-line parameters."""
    return derive(params.app_name, params.size, params.openebs_storage_class)

"""
Type definitions for onfs.

ManifestParams is what the command line hands over; ManifestParameterRecord is
the fully derived set of names and sizes substituted into the manifest.
"""

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List

DEFAULT_STORAGE_SIZE = 5.0
DEFAULT_OPENEBS_STORAGE_CLASS = "openebs-jiva-default"

# Extra capacity given to the backing volume for filesystem overhead
HEADROOM_RATIO = 0.1

# Suffixes joined to the application name with a hyphen
PROVISIONER_STATEFUL_SUFFIX = "openebs-nfs-provisioner"
NFS_CLUSTER_ROLE_SUFFIX = "openebs-nfs-provisioner-runner"
NFS_CLUSTER_ROLE_BINDING_SUFFIX = "openebs-run-nfs-provisioner"
NFS_ROLE_SUFFIX = "openebs-leader-locking-nfs-provisioner"
NFS_STORAGE_CLASS_SUFFIX = "openebs-nfs"
NFS_PVC_SUFFIX = "openebs-nfs-pvc"

# Suffixes joined to the application name directly
PROVISIONER_SUFFIX = "openebs.io/nfs"
OPENEBS_PVC_SUFFIX = "openebspvc"

MAX_LABEL_LENGTH = 63
MAX_APP_NAME_LENGTH = MAX_LABEL_LENGTH - len(f"-{PROVISIONER_STATEFUL_SUFFIX}")

_DNS_1035_LABEL = re.compile(r"[a-z]([-a-z0-9]*[a-z0-9])?")


class AccessMode(str, Enum):
    """PersistentVolumeClaim access mode."""
    READ_WRITE_ONCE = "ReadWriteOnce"
    READ_WRITE_MANY = "ReadWriteMany"


@dataclass(frozen=True)
class ManifestParams:
    """Parameters collected from the command line."""
    app_name: str
    size: float = DEFAULT_STORAGE_SIZE
    openebs_storage_class: str = DEFAULT_OPENEBS_STORAGE_CLASS


@dataclass(frozen=True)
class ManifestParameterRecord:
    """All resource names and sizes for one application's NFS manifest."""
    application_name: str
    provisioner_stateful_name: str
    nfs_cluster_role_name: str
    nfs_cluster_role_binding_name: str
    nfs_role_name: str
    provisioner_name: str
    openebs_pvc_name: str
    nfs_storage_class: str
    nfs_pvc_name: str
    openebs_storage_class: str
    nfs_access_mode: AccessMode
    requested_storage_size: float
    nfs_storage_size: str
    openebs_storage_size: str

    def to_context(self) -> Dict[str, Any]:
        """Template substitution mapping, with enums replaced by their values."""
        context = asdict(self)
        for key, value in context.items():
            if isinstance(value, Enum):
                context[key] = value.value
        return context


def validate_app_name(name: str) -> List[str]:
    """
    Check an application name against Kubernetes naming rules.

    The name prefixes a Service name and an ``app`` label value, so it has to
    be a DNS-1035 label short enough for the longest of those to fit.

    Returns list of problems (empty if valid).
    """
    if not name:
        return ["name must not be empty"]

    errors = []
    if not _DNS_1035_LABEL.fullmatch(name):
        errors.append(
            "must consist of lowercase alphanumerics or '-', start with a letter "
            "and end with an alphanumeric character"
        )
    if len(name) > MAX_APP_NAME_LENGTH:
        errors.append(
            f"must be at most {MAX_APP_NAME_LENGTH} characters "
            f"(got {len(name)})"
        )
    return errors

"""
Resource CID validation.

A CID is the server-assigned path of a resource instance, e.g.
/dashboard/1234. Its shape is the only check made locally before a request
addresses a single resource.
"""

import re
from typing import Optional

from .errors import InvalidCIDError


def cid_pattern(base_path: str) -> str:
    """Regex for CIDs under a collection path: ^/dashboard/[0-9]+$"""
    return "^" + base_path + "/[0-9]+$"


def is_valid_cid(cid: Optional[str], base_path: str) -> bool:
    """
    Check whether a CID has the resource-specific shape.

    Raises:
        re.error: If the pattern built from base_path does not compile
    """
    if not cid:
        return False
    return re.fullmatch(cid_pattern(base_path), cid) is not None


def validate_cid(cid: Optional[str], base_path: str, label: str) -> str:
    """
    Validate a CID and return it unchanged.

    Args:
        cid: CID to check (None and "" are treated as absent)
        base_path: Collection path of the resource, e.g. /dashboard
        label: Human readable resource name used in error messages

    Returns:
        The CID string

    Raises:
        InvalidCIDError: "Invalid <label> CID [none]" when absent,
            "Invalid <label> CID [<cid>]" when malformed
    """
    if cid is None or cid == "":
        raise InvalidCIDError(f"Invalid {label} CID [none]")
    if not is_valid_cid(cid, base_path):
        raise InvalidCIDError(f"Invalid {label} CID [{cid}]")
    return cid

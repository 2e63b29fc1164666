"""IBC denom derivation."""

import hashlib

IBC_PREFIX = "ibc/"


def calculate_ibc_hash(path: str) -> str:
    """Return ``ibc/`` + uppercase hex SHA-256 of a transfer path, e.g. ``transfer/channel-0/uatom``."""
    digest = hashlib.sha256(path.encode("utf-8")).hexdigest()
    return IBC_PREFIX + digest.upper()

"""
Value fingerprinting for serialised findings.
"""

from typing import Optional, Union
from cryptography.hazmat.primitives import hashes, hmac


def fingerprint_value(value: Union[str, bytes], key: Optional[bytes] = None) -> str:
    """
    Compute a stable fingerprint of a detected value.
    
    Args:
        value: Raw matched text
        key: Optional secret; when given an HMAC-SHA256 is used so that
            fingerprints cannot be reversed by hashing candidate values
        
    Returns:
        Hex-encoded SHA-256 digest
    """
    if isinstance(value, str):
        value = value.encode('utf-8')
    
    if key:
        digest = hmac.HMAC(key, hashes.SHA256())
    else:
        digest = hashes.Hash(hashes.SHA256())
    
    digest.update(value)
    return digest.finalize().hex()

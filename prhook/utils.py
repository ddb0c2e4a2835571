"""the beautiful world start from here."""

from __future__ import annotations

import hashlib
import hmac
import re

from prhook.errors import InvalidSignature, MalformedSignature

SIGNATURE_PREFIX = "sha256="

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")


def verify_signature(body: bytes, secret: bytes, signature_header: str) -> None:
    """
    Verify GitHub webhook HMAC signature (X-Hub-Signature-256).

    Raises
    ------
    MalformedSignature
        Header is not ``sha256=`` followed by hex digits.
    InvalidSignature
        Digest does not match ``HMAC-SHA256(secret, body)``.
    """
    if not signature_header.startswith(SIGNATURE_PREFIX):
        raise MalformedSignature("missing sha256= prefix")
    sig = signature_header[len(SIGNATURE_PREFIX):]
    if not _HEX_RE.fullmatch(sig):
        raise MalformedSignature("digest is not hex encoded")
    expected = hmac.new(secret, msg=body, digestmod=hashlib.sha256).digest()
    if not hmac.compare_digest(expected, bytes.fromhex(sig)):
        raise InvalidSignature("signature mismatch")

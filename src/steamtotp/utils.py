import base64
import binascii
import re
import unicodedata
from hmac import compare_digest
from typing import Union

HEX_SECRET = re.compile(rb"[0-9a-fA-F]{40}")
BASE64_SECRET = re.compile(
    rb"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$"
)


def bufferize_secret(secret: Union[str, bytes, bytearray]) -> bytes:
    """
    Turns a secret given as hex text, base64 text or raw bytes into the
    bytes used as the HMAC key.

    Hex wins over base64 and is found anywhere in the input, so a 40 character
    hex run inside a longer string is what gets decoded. Anything that is
    neither is passed through untouched; this never raises.

    :param secret: shared or identity secret in any of the supported forms
    :returns: raw key bytes
    """
    if isinstance(secret, str):
        data = secret.encode("utf-8")
    else:
        data = bytes(secret)

    match = HEX_SECRET.search(data)
    if match:
        return binascii.unhexlify(match.group(0))

    if BASE64_SECRET.match(data):
        # the pattern's $ also allows one trailing newline, which b64decode drops
        return base64.b64decode(data)

    return data


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))

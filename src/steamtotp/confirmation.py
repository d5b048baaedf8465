import base64
import hashlib
import hmac
from typing import Optional, Union

from .otp import OTP
from .utils import bufferize_secret

# Tags the mobile confirmation endpoints expect. Not validated here.
TAGS = ("conf", "details", "allow", "cancel")


def generate_confirmation_key(
    identity_secret: Union[str, bytes],
    time: int,
    tag: Optional[str] = "",
) -> str:
    """
    Generate a base64 confirmation key for mobile trade confirmations.
    Steam accepts each key only once.

    :param identity_secret: identity secret as a hex string, base64 string or raw bytes
    :param time: the Unix time the key is generated for, generally the current time
    :param tag: what the key is for: "conf" to load the confirmations page,
        "details" for trade details, "allow" to confirm a trade, "cancel" to cancel it
    :returns: base64 encoded HMAC-SHA1 signature
    """
    msg = OTP.int_to_bytestring(int(time))
    if tag:
        msg += tag.encode("utf-8")

    digest = hmac.new(bufferize_secret(identity_secret), msg, hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")

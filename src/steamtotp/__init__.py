from typing import Union

from .confirmation import TAGS as TAGS
from .confirmation import generate_confirmation_key as get_confirmation_key
from .device import get_device_id as get_device_id
from .otp import CHARSET as CHARSET
from .otp import CODE_LENGTH as CODE_LENGTH
from .otp import OTP as OTP
from .timesync import get_time_offset as get_time_offset
from .totp import INTERVAL as INTERVAL
from .totp import TOTP as TOTP
from .utils import bufferize_secret as bufferize_secret


def get_auth_code(shared_secret: Union[str, bytes], time_offset: int = 0) -> str:
    """
    Generate a Steam Guard login code for the current time.

    :param shared_secret: shared secret as a hex string, base64 string or raw bytes
    :param time_offset: how many seconds the local clock is behind Steam,
        see :func:`get_time_offset`
    :returns: 5 character login code
    """
    return TOTP(shared_secret).now(time_offset)

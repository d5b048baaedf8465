import hashlib
from typing import Union


def get_device_id(steamid: Union[str, int]) -> str:
    """
    Get a standardized device ID based on a SteamID.

    :param steamid: SteamID in 64-bit format, as a string or integer
    :returns: ``android:`` followed by a UUID-shaped slice of SHA1(steamid)
    """
    h = hashlib.sha1(str(steamid).encode("utf-8")).hexdigest()
    return "android:{}-{}-{}-{}-{}".format(h[:8], h[8:12], h[12:16], h[16:20], h[20:32])

import hashlib
import hmac
import struct
from typing import Union

from . import utils

CHARSET = "23456789BCDFGHJKMNPQRTVWXY"
CODE_LENGTH = 5


class OTP(object):
    """
    Base class for Steam Guard code handlers.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = CODE_LENGTH,
    ) -> None:
        """
        :param s: shared secret as a hex string, base64 string or raw bytes
        :param digits: number of characters in the code. Steam expects 5.
        """
        if digits < 1:
            raise ValueError("digits must be a positive integer")
        self.digits = digits
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually the computed integer based on the Unix timestamp
        """
        hmac_hash = hmac.new(self.byte_secret(), self.int_to_bytestring(input), hashlib.sha1).digest()

        # dynamic truncation, RFC 4226 style
        offset = hmac_hash[19] & 0x0F
        fullcode = struct.unpack(">I", hmac_hash[offset : offset + 4])[0] & 0x7FFFFFFF

        # least significant character first
        code = []
        for _ in range(self.digits):
            fullcode, index = divmod(fullcode, len(CHARSET))
            code.append(CHARSET[index])
        return "".join(code)

    def byte_secret(self) -> bytes:
        return utils.bufferize_secret(self.secret)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer into the big-endian bytestring fed to the HMAC
        along with the secret. Values outside the unsigned range wrap
        around, as a 64-bit counter would.
        """
        i &= (1 << (8 * padding)) - 1
        return i.to_bytes(padding, "big")

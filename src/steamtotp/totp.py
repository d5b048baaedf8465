import calendar
import datetime
import time
from typing import Union

from . import utils
from .otp import CODE_LENGTH, OTP

INTERVAL = 30


class TOTP(OTP):
    """
    Handler for Steam Guard time-based login codes.
    """

    def __init__(
        self,
        s: Union[str, bytes],
        digits: int = CODE_LENGTH,
        interval: int = INTERVAL,
    ) -> None:
        """
        :param s: shared secret as a hex string, base64 string or raw bytes
        :param digits: number of characters in the code
        :param interval: the time interval in seconds for code generation
        """
        if interval < 1:
            raise ValueError("interval must be a positive integer")
        self.interval = interval
        super().__init__(s=s, digits=digits)

    def at(self, for_time: Union[int, float, datetime.datetime], time_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp or a datetime object.

        :param for_time: the time to generate a code for
        :param time_offset: seconds to add to ``for_time``, usually the
            result of :func:`steamtotp.timesync.get_time_offset`
        :returns: login code
        """
        return self.generate_otp(self.timecode(for_time, time_offset))

    def now(self, time_offset: int = 0) -> str:
        """
        Generate the current login code.

        :param time_offset: how many seconds the local clock is behind Steam
        :returns: login code
        """
        return self.at(time.time(), time_offset)

    def verify(
        self,
        otp: str,
        for_time: Union[int, float, datetime.datetime, None] = None,
        valid_window: int = 0,
        time_offset: int = 0,
    ) -> bool:
        """
        Verifies the code passed in against the current time code.

        :param otp: the code to check against
        :param for_time: time to check the code at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :param time_offset: seconds to add to ``for_time``
        :returns: True if verification succeeded, False otherwise
        """
        if valid_window < 0:
            raise ValueError("valid_window must not be negative")
        if for_time is None:
            for_time = time.time()

        counter = self.timecode(for_time, time_offset)
        if valid_window:
            for i in range(-valid_window, valid_window + 1):
                if utils.strings_equal(str(otp), self.generate_otp(counter + i)):
                    return True
            return False

        return utils.strings_equal(str(otp), self.generate_otp(counter))

    def timecode(self, for_time: Union[int, float, datetime.datetime], time_offset: int = 0) -> int:
        """
        Returns the interval counter for a timestamp or datetime.
        Naive datetimes are read as local time.
        """
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                for_time = calendar.timegm(for_time.utctimetuple())
            else:
                for_time = time.mktime(for_time.timetuple())
        return int((int(for_time) + time_offset) // self.interval)

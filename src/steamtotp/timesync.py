import logging
import time
from typing import Optional

import requests

logger = logging.getLogger(__name__)

STEAM_API_BASE = "https://api.steampowered.com"
QUERY_TIME_URL = STEAM_API_BASE + "/ITwoFactorService/QueryTime/v1/"
DEFAULT_TIMEOUT = 10


def query_server_time(
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[int]:
    """
    Ask Steam for its current Unix time.

    :param session: requests session to use, a new one is opened if omitted
    :param timeout: request timeout in seconds
    :returns: the server time, or None if it could not be obtained
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()

    logger.debug("Querying server time from %s", QUERY_TIME_URL)
    try:
        response = session.post(QUERY_TIME_URL, headers={"Content-Length": "0"}, timeout=timeout)
        response.raise_for_status()
        return int(response.json()["response"]["server_time"])
    except requests.RequestException as e:
        logger.warning("Server time query failed: %s", e)
    except (ValueError, KeyError, TypeError, OverflowError) as e:
        logger.warning("Server time response was malformed: %r", e)
    finally:
        if owns_session:
            session.close()
    return None


def get_time_offset(
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[int]:
    """
    Queries the Steam servers for their time, then subtracts our local time
    from it. The offset is how many seconds we are *behind* Steam, so it can
    be passed as ``time_offset`` to the code generators as is.

    :returns: offset in seconds, or None when the server time is unavailable
    """
    server_time = query_server_time(session=session, timeout=timeout)
    if server_time is None:
        return None
    return server_time - int(time.time())

"""
Trusted wall-clock time from a public time service.

Game clients use this to detect a tampered system clock before granting
time-gated rewards. This is a single blocking HTTP call with naive retry,
intended for startup checks rather than frequent polling.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from datetime import datetime, timedelta, timezone
from urllib.error import URLError, HTTPError
from urllib.request import Request, urlopen

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_value

logger = logging.getLogger(__name__)

# @formatter:off

# Constants ------------------------------------------------------------------------------------------------------------

NIST_TIME_URL = "http://nist.time.gov/actualtime.cgi"

DEFAULT_RETRIES = 3                     # Attempts before giving up
DEFAULT_TIMEOUT_SEC = 5.0               # Per-attempt socket timeout

# Browser-like headers, the service rejects bare clients
REQUEST_HEADERS = {
    "Accept": "text/html, application/xhtml+xml, */*",
    "User-Agent": "Mozilla/5.0 (compatible; MSIE 10.0; Windows NT 6.1; Trident/6.0)",
    "Content-Type": "application/x-www-form-urlencoded",
    "Cache-Control": "no-cache, no-store",
    "Pragma": "no-cache",
}

# Response body: <timestamp time="1395772696469995" delay="1395772696469995"/>
_TIME_ATTR_RE = re.compile(r'\btime="([^"]*)"')

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# @formatter:on

# Main API functions ---------------------------------------------------------------------------------------------------

def fetch_nist_time(
        url: str = NIST_TIME_URL,
        *,
        retries: int = DEFAULT_RETRIES,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
) -> datetime | None:
    """
    Fetch the current UTC time from the NIST time service.

    Each attempt that fails (non-200 status, connection error, timeout or an
    unparsable body) is logged as a warning and retried immediately. No
    exception escapes for network failures; the caller gets None instead.

    Args:
        url: Time service endpoint returning a `time="<microseconds>"` attribute.
        retries: Number of attempts, at least 1.
        timeout_sec: Socket timeout per attempt in seconds.

    Returns:
        Timezone-aware UTC datetime, or None when every attempt failed.

    Raises:
        ValueError: If retries or timeout_sec are invalid.

    Examples:
        >>> now = fetch_nist_time()
        >>> if now is None:
        ...     now = datetime.now(timezone.utc)  # offline fallback
    """
    if not isinstance(retries, int) or isinstance(retries, bool) or retries < 1:
        raise ValueError(f"retries must be int >= 1, got {fmt_value(retries)}")
    if timeout_sec <= 0:
        raise ValueError(f"timeout_sec must be positive, got {fmt_value(timeout_sec)}")

    for attempt in range(1, retries + 1):
        try:
            request = Request(url, headers=REQUEST_HEADERS, method="GET")
            with urlopen(request, timeout=timeout_sec) as response:
                status = response.status
                if status != 200:
                    logger.warning("Could not get date/time from %s: HTTP %s (attempt %d/%d)",
                                   url, status, attempt, retries)
                    continue
                body = response.read().decode("utf-8", errors="replace")
            result = parse_nist_timestamp(body)
        except HTTPError as e:
            logger.warning("Could not get date/time from %s: HTTP %s (attempt %d/%d)",
                           url, e.code, attempt, retries)
        except (URLError, TimeoutError, OSError) as e:
            logger.warning("Could not get date/time from %s: %s (attempt %d/%d)",
                           url, e, attempt, retries)
        except ValueError as e:
            logger.warning("Invalid time response from %s: %s (attempt %d/%d)",
                           url, e, attempt, retries)
        else:
            logger.debug("Fetched time %s from %s", result.isoformat(), url)
            return result

    logger.error("Could not get date/time from %s after %d attempts", url, retries)
    return None


def parse_nist_timestamp(text: str) -> datetime:
    """
    Parse the `time` attribute of a NIST time service response.

    The attribute holds microseconds since the Unix epoch.

    Raises:
        ValueError: If the attribute is missing, not an integer or beyond the datetime range.

    Examples:
        >>> parse_nist_timestamp('<timestamp time="1395772696469995" delay="0"/>')
        datetime.datetime(2014, 3, 25, 18, 38, 16, 469995, tzinfo=datetime.timezone.utc)
    """
    match = _TIME_ATTR_RE.search(text)
    if match is None:
        raise ValueError(f"no time attribute in response: {fmt_value(text, max_repr=80)}")
    raw = match.group(1).strip()
    if not raw.isdigit():
        raise ValueError(f"time attribute must be integer microseconds, got {fmt_value(raw)}")
    try:
        return _EPOCH + timedelta(microseconds=int(raw))
    except (OverflowError, ValueError) as e:
        raise ValueError(f"time attribute out of range: {fmt_value(raw, max_repr=40)}") from e

import logging
from datetime import datetime
from datetime import timezone
from typing import Optional
from typing import Union
from urllib.parse import ParseResult
from urllib.parse import urlparse

from cryptojwt.jwt import utc_time_sans_frac
from cryptojwt.utils import as_bytes
from lxml import etree

from fedtoken.exception import ConfigurationError
from fedtoken.exception import MalformedDocument

logger = logging.getLogger(__name__)

def https_url(url, what: Optional[str] = "endpoint") -> ParseResult:
    """
    Parse a URL and make sure it uses HTTPS.

    :param url: A string or an already parsed URL
    :param what: Used in the error message
    :return: The parsed URL
    """
    if isinstance(url, ParseResult):
        _url = url
    else:
        _url = urlparse(str(url))

    if _url.scheme != "https" or not _url.netloc:
        raise ConfigurationError(f"The {what} must be an https URL, got '{_url.geturl()}'")
    return _url


def parse_xml(document: Union[str, bytes]):
    try:
        # A parser instance must not be shared between threads
        _parser = etree.XMLParser(resolve_entities=False, no_network=True)
        return etree.fromstring(as_bytes(document), parser=_parser)
    except etree.XMLSyntaxError as err:
        raise MalformedDocument(f"Could not parse XML document: {err}") from err


def timestamp(offset: Optional[int] = 0) -> str:
    """ISO 8601 UTC time stamp as used in WS-Security headers."""
    _time = datetime.fromtimestamp(utc_time_sans_frac() + offset, tz=timezone.utc)
    return _time.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def check_content_type(response, expected):
    _content_type = response.headers.get("Content-Type", "")
    if expected not in _content_type:
        logger.warning(f"Wrong Content-Type: {_content_type}")

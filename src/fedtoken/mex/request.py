import logging
from typing import Callable
from typing import Optional

import requests

from fedtoken.mex.response import MexResponse
from fedtoken.utils import check_content_type
from fedtoken.utils import https_url

logger = logging.getLogger(__name__)


class MexRequest(object):
    """Fetches a Metadata Exchange document and parses it."""

    def __init__(self,
                 endpoint: str,
                 http_cli: Optional[Callable] = None,
                 httpc_params: Optional[dict] = None,
                 logger: Optional[logging.Logger] = None):
        """

        :param endpoint: The federation metadata URL
        :param http_cli: Callable with the same signature as requests.request
        :param httpc_params: Additional parameters to pass to the HTTP client function
        :param logger: Handed on to the MEX parser
        """
        self.endpoint = https_url(endpoint, "MEX endpoint")
        self.http_cli = http_cli or requests.request
        self.httpc_params = httpc_params or {}
        self.logger = logger

    def execute(self) -> MexResponse:
        _url = self.endpoint.geturl()
        logger.debug(f"Fetching MEX document from {_url}")
        response = self.http_cli("GET", _url, **self.httpc_params)
        response.raise_for_status()
        check_content_type(response, "xml")
        return MexResponse.parse(response.content, logger=self.logger)

import json
import logging
from typing import Callable
from typing import Optional
from urllib.parse import quote
from urllib.parse import urlencode
from urllib.parse import urlunparse

from idpyoidc.exception import MissingRequiredAttribute
import requests

from fedtoken.defaults import DEFAULT_AUTHORITY_HOST
from fedtoken.defaults import USER_REALM_API_VERSION
from fedtoken.defaults import USER_REALM_PATH
from fedtoken.exception import DiscoveryError
from fedtoken.message import UserRealmResponse
from fedtoken.utils import check_content_type

logger = logging.getLogger(__name__)


class UserRealm(object):
    """Asks the identity provider which kind of account a username belongs to."""

    def __init__(self,
                 username: str,
                 authority_host: Optional[str] = DEFAULT_AUTHORITY_HOST,
                 http_cli: Optional[Callable] = None,
                 httpc_params: Optional[dict] = None):
        self.username = username
        self.authority_host = authority_host
        self.http_cli = http_cli or requests.request
        self.httpc_params = httpc_params or {}

    @property
    def url(self) -> str:
        return urlunparse(("https", self.authority_host,
                           USER_REALM_PATH.format(quote(self.username, safe="@")), "",
                           urlencode({"api-version": USER_REALM_API_VERSION}), ""))

    def discover(self) -> UserRealmResponse:
        _url = self.url
        logger.debug(f"User realm discovery: {_url}")
        response = self.http_cli("GET", _url, **self.httpc_params)
        if response.status_code != 200:
            raise DiscoveryError(
                f"User realm discovery failed: {response.status_code} {response.text}")

        check_content_type(response, "json")
        try:
            _info = json.loads(response.text)
        except ValueError as err:
            raise DiscoveryError(f"Could not parse user realm response: {err}") from err
        if not isinstance(_info, dict):
            raise DiscoveryError(f"User realm response is not a JSON object: {response.text}")

        try:
            _resp = UserRealmResponse(**_info)
            _resp.verify()
        except ValueError as err:
            raise DiscoveryError(f"Could not parse user realm response: {err}") from err
        except MissingRequiredAttribute as err:
            raise DiscoveryError(f"Incomplete user realm response: {err}") from err

        logger.debug(f"Account type for {self.username}: {_resp['account_type']}")
        return _resp

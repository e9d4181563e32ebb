import base64
import logging
from enum import Enum
from typing import Callable
from typing import Optional

from cryptojwt.utils import as_bytes
from cryptojwt.utils import as_unicode

from fedtoken.defaults import DEFAULT_APPLIES_TO
from fedtoken.defaults import DEFAULT_AUTHORITY_HOST
from fedtoken.defaults import DEFAULT_SCOPE
from fedtoken.defaults import PASSWORD_GRANT
from fedtoken.exception import DiscoveryError
from fedtoken.exception import UnsupportedAccountTypeError
from fedtoken.message import AssertionTokenRequest
from fedtoken.message import PasswordTokenRequest
from fedtoken.mex.request import MexRequest
from fedtoken.user_realm import UserRealm
from fedtoken.wstrust.request import WSTrustRequest

logger = logging.getLogger(__name__)


class AccountType(Enum):
    FEDERATED = "Federated"
    MANAGED = "Managed"
    UNKNOWN = "Unknown"

    @classmethod
    def from_value(cls, value):
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class UserCredential(object):
    """
    A username and password pair. Depending on the account type the password is either
    handed to the token endpoint as is or exchanged for a SAML assertion at the user's
    WS-Trust identity provider.
    """

    def __init__(self,
                 username: str,
                 password: str,
                 authority_host: Optional[str] = DEFAULT_AUTHORITY_HOST,
                 applies_to: Optional[str] = DEFAULT_APPLIES_TO,
                 scope: Optional[str] = DEFAULT_SCOPE,
                 http_cli: Optional[Callable] = None,
                 httpc_params: Optional[dict] = None,
                 logger: Optional[logging.Logger] = None):
        """

        :param username: The user's username, normally an email address
        :param password: The user's password
        :param authority_host: Host of the user realm discovery endpoint
        :param applies_to: Audience of the SAML assertion if discovery doesn't name one
        :param scope: Scope of the token request
        :param http_cli: Callable with the same signature as requests.request
        :param httpc_params: Additional parameters to pass to the HTTP client function
        :param logger: Used by the MEX parser for warnings
        """
        self.username = username
        self.password = password
        self.authority_host = authority_host
        self.applies_to = applies_to
        self.scope = scope
        self.http_cli = http_cli
        self.httpc_params = httpc_params or {}
        self.logger = logger

        # Written once after the first successful discovery. There is no lock, concurrent
        # first reads may each do a discovery request.
        self._account_type = None
        self._user_realm = None

        self._param_builder = {
            AccountType.FEDERATED: self._federated_params,
            AccountType.MANAGED: self._managed_params,
            AccountType.UNKNOWN: self._unsupported,
        }

    @classmethod
    def from_config(cls, config, username: str, password: str, **kwargs):
        """
        :param config: A :py:class:`fedtoken.configure.FedTokenConfiguration` instance
        """
        return cls(username, password,
                   authority_host=config.authority_host,
                   applies_to=config.applies_to,
                   scope=config.scope,
                   httpc_params=config.httpc_params,
                   **kwargs)

    @property
    def account_type(self) -> AccountType:
        if self._account_type is None:
            _realm = UserRealm(self.username, authority_host=self.authority_host,
                               http_cli=self.http_cli, httpc_params=self.httpc_params)
            self._user_realm = _realm.discover()
            self._account_type = AccountType.from_value(self._user_realm["account_type"])
        return self._account_type

    def request_params(self) -> dict:
        """
        Parameters for the token request. Federated users get a fresh assertion every time.

        :return: dictionary
        """
        return self._param_builder[self.account_type]()

    def _federated_params(self) -> dict:
        _mex_url = self._user_realm.get("federation_metadata_url")
        if not _mex_url:
            raise DiscoveryError(f"No federation metadata URL for {self.username}")

        mex = MexRequest(_mex_url, http_cli=self.http_cli, httpc_params=self.httpc_params,
                         logger=self.logger).execute()
        logger.debug(f"WS-Trust endpoint {mex.wstrust_url.geturl()}, action {mex.action}")

        wstrust = WSTrustRequest(mex.wstrust_url, mex.action,
                                 applies_to=self._user_realm.get("cloud_audience_urn",
                                                                 self.applies_to),
                                 http_cli=self.http_cli,
                                 httpc_params=self.httpc_params
                                 ).execute(self.username, self.password)

        _assertion = as_unicode(base64.b64encode(as_bytes(wstrust.token)))
        return AssertionTokenRequest(assertion=_assertion, grant_type=wstrust.grant_type,
                                     scope=self.scope).to_dict()

    def _managed_params(self) -> dict:
        return PasswordTokenRequest(username=self.username, password=self.password,
                                    grant_type=PASSWORD_GRANT, scope=self.scope).to_dict()

    def _unsupported(self):
        raise UnsupportedAccountTypeError(
            f"Account type {self._user_realm['account_type']!r} of {self.username} is not "
            f"supported")

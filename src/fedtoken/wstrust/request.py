import logging
import uuid
from typing import Callable
from typing import Optional

from lxml import etree
import requests

from fedtoken.defaults import ACTION_TO_WSTRUST_VERSION
from fedtoken.defaults import ANONYMOUS_ADDRESS
from fedtoken.defaults import DEFAULT_APPLIES_TO
from fedtoken.defaults import NAMESPACES
from fedtoken.defaults import RST_LIFETIME
from fedtoken.defaults import SOAP_CONTENT_TYPE
from fedtoken.defaults import WSTRUST_RST_PARAMETERS
from fedtoken.exception import UnsupportedAction
from fedtoken.utils import https_url
from fedtoken.utils import timestamp
from fedtoken.wstrust.response import WSTrustResponse

logger = logging.getLogger(__name__)


def qname(prefix, tag):
    return etree.QName(NAMESPACES[prefix], tag)


def _sub(parent, prefix, tag, text=None, **attrib):
    elem = etree.SubElement(parent, qname(prefix, tag))
    for key, val in attrib.items():
        _prefix, _attr = key.split("_", 1)
        elem.set(qname(_prefix, _attr), val)
    if text is not None:
        elem.text = text
    return elem


class WSTrustRequest(object):
    """Sends a RequestSecurityToken to a WS-Trust endpoint."""

    def __init__(self,
                 endpoint,
                 action: Optional[str],
                 applies_to: Optional[str] = DEFAULT_APPLIES_TO,
                 http_cli: Optional[Callable] = None,
                 httpc_params: Optional[dict] = None):
        self.endpoint = https_url(endpoint, "WS-Trust endpoint")
        try:
            self.version = ACTION_TO_WSTRUST_VERSION[action]
        except KeyError:
            raise UnsupportedAction(f"Unsupported WS-Trust action: {action}")
        self.action = action
        self.applies_to = applies_to
        self.http_cli = http_cli or requests.request
        self.httpc_params = httpc_params or {}

    def _header(self, envelope, username, password):
        header = _sub(envelope, "s", "Header")
        _sub(header, "wsa", "Action", self.action, s_mustUnderstand="1")
        _sub(header, "wsa", "MessageID", f"urn:uuid:{uuid.uuid4()}")
        reply_to = _sub(header, "wsa", "ReplyTo")
        _sub(reply_to, "wsa", "Address", ANONYMOUS_ADDRESS)
        _sub(header, "wsa", "To", self.endpoint.geturl(), s_mustUnderstand="1")

        security = _sub(header, "wsse", "Security", s_mustUnderstand="1")
        _timestamp = _sub(security, "u", "Timestamp", u_Id="_0")
        _sub(_timestamp, "u", "Created", timestamp())
        _sub(_timestamp, "u", "Expires", timestamp(RST_LIFETIME))
        _token = _sub(security, "wsse", "UsernameToken", u_Id="UsernameToken")
        _sub(_token, "wsse", "Username", username)
        _sub(_token, "wsse", "Password", password)

    def _body(self, envelope):
        trust, key_type, request_type = WSTRUST_RST_PARAMETERS[self.version]
        body = _sub(envelope, "s", "Body")
        rst = _sub(body, trust, "RequestSecurityToken")
        applies_to = _sub(rst, "wsp", "AppliesTo")
        reference = _sub(applies_to, "wsa", "EndpointReference")
        _sub(reference, "wsa", "Address", self.applies_to)
        _sub(rst, trust, "KeyType", key_type)
        _sub(rst, trust, "RequestType", request_type)

    def rst(self, username: str, password: str) -> bytes:
        """
        Construct the RequestSecurityToken SOAP envelope.

        :param username: The federated user's username
        :param password: The federated user's password
        :return: The serialized envelope
        """
        trust = WSTRUST_RST_PARAMETERS[self.version][0]
        nsmap = {p: NAMESPACES[p] for p in ["s", "wsa", "u", "wsse", "wsp", trust]}
        envelope = etree.Element(qname("s", "Envelope"), nsmap=nsmap)
        self._header(envelope, username, password)
        self._body(envelope)
        return etree.tostring(envelope, xml_declaration=True, encoding="utf-8")

    def execute(self, username: str, password: str) -> WSTrustResponse:
        _url = self.endpoint.geturl()
        logger.debug(f"Sending WS-Trust {self.version} request to {_url}")
        headers = {"Content-Type": SOAP_CONTENT_TYPE, "SOAPAction": self.action}
        response = self.http_cli("POST", _url, data=self.rst(username, password),
                                 headers=headers, **self.httpc_params)
        if response.status_code == 500:
            WSTrustResponse.raise_for_fault(response.content)
        response.raise_for_status()
        return WSTrustResponse.parse(response.content)

import logging
from typing import Union

from lxml import etree

from fedtoken.defaults import NAMESPACES
from fedtoken.defaults import TOKEN_TYPE_TO_GRANT_TYPE
from fedtoken.exception import MalformedDocument
from fedtoken.exception import UnparsableTokenResponse
from fedtoken.exception import WSTrustFault
from fedtoken.utils import parse_xml

logger = logging.getLogger(__name__)

NSMAP = dict(NAMESPACES)

FAULT_XPATH = "/s:Envelope/s:Body/s:Fault"
FAULT_CODE_XPATH = "./s:Code/s:Value/text()"
FAULT_SUBCODE_XPATH = "./s:Code/s:Subcode/s:Value/text()"
FAULT_REASON_XPATH = "./s:Reason/s:Text/text()"
RSTR_XPATH = "//trust:RequestSecurityTokenResponse|//t:RequestSecurityTokenResponse"
TOKEN_TYPE_XPATH = "./trust:TokenType/text()|./t:TokenType/text()"
TOKEN_XPATH = "./trust:RequestedSecurityToken/*|./t:RequestedSecurityToken/*"


def _fault(tree):
    for fault in tree.xpath(FAULT_XPATH, namespaces=NSMAP):
        # The subcode, if present, is the more specific one
        codes = (fault.xpath(FAULT_SUBCODE_XPATH, namespaces=NSMAP)
                 or fault.xpath(FAULT_CODE_XPATH, namespaces=NSMAP))
        reason = fault.xpath(FAULT_REASON_XPATH, namespaces=NSMAP)
        return WSTrustFault(str(codes[0]).strip() if codes else "unknown",
                            str(reason[0]).strip() if reason else "")
    return None


class WSTrustResponse(object):
    """The token part of a RequestSecurityTokenResponse."""

    def __init__(self, token: str, token_type: str):
        self.token = token
        self.token_type = token_type

    @property
    def grant_type(self) -> str:
        try:
            return TOKEN_TYPE_TO_GRANT_TYPE[self.token_type]
        except KeyError:
            raise UnparsableTokenResponse(f"Unknown token type: {self.token_type}")

    @staticmethod
    def raise_for_fault(document: Union[str, bytes]):
        """
        Raise WSTrustFault if the document is a SOAP fault. Anything else is left to the
        caller.
        """
        try:
            tree = parse_xml(document)
        except MalformedDocument:
            logger.debug("Error response is not XML")
            return

        fault = _fault(tree)
        if fault is not None:
            raise fault

    @classmethod
    def parse(cls, document: Union[str, bytes]):
        """
        Parse a WS-Trust 1.3 or 2005 RequestSecurityTokenResponse.

        :param document: The SOAP response
        :return: A WSTrustResponse instance
        """
        tree = parse_xml(document)

        fault = _fault(tree)
        if fault is not None:
            raise fault

        rstr = tree.xpath(RSTR_XPATH, namespaces=NSMAP)
        if not rstr:
            raise UnparsableTokenResponse("No RequestSecurityTokenResponse found.")
        elif len(rstr) > 1:
            logger.warning("More than one RequestSecurityTokenResponse, using the first.")

        token_type = rstr[0].xpath(TOKEN_TYPE_XPATH, namespaces=NSMAP)
        if not token_type:
            raise UnparsableTokenResponse("No token type in the response.")

        token = rstr[0].xpath(TOKEN_XPATH, namespaces=NSMAP)
        if not token:
            raise UnparsableTokenResponse("No security token in the response.")

        return cls(etree.tostring(token[0], encoding="unicode", with_tail=False),
                   str(token_type[0]).strip())

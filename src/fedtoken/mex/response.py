import logging
from typing import Optional
from typing import Union

from fedtoken.defaults import BINDING_TO_ACTION
from fedtoken.exception import NoMatchingBinding
from fedtoken.exception import NoMatchingPolicy
from fedtoken.exception import NoValidEndpoint
from fedtoken.mex import policy
from fedtoken.utils import https_url
from fedtoken.utils import parse_xml

LOGGER = logging.getLogger(__name__)


class MexResponse(object):
    """The parts of a Metadata Exchange document needed to do a WS-Trust exchange."""

    def __init__(self, wstrust_url, binding: str):
        self.action = BINDING_TO_ACTION.get(binding)
        self.binding = binding
        self.wstrust_url = https_url(wstrust_url, "WS-Trust endpoint")

    @classmethod
    def parse(cls, document: Union[str, bytes], logger: Optional[logging.Logger] = None):
        """
        Parse a MEX document into a MexResponse instance.

        The username token policies are found first, then the bindings that refer to them and
        last the service ports that use those bindings. If more than one port matches the
        first one is used.

        :param document: The MEX document as a string or bytes
        :param logger: Where the warning about multiple matching endpoints goes
        :return: A MexResponse instance
        """
        _log = logger or LOGGER
        tree = parse_xml(document)

        policy_ids = policy.policy_ids(tree)
        if not policy_ids:
            raise NoMatchingPolicy("No username token policy nodes.")

        bindings = policy.bindings(tree, policy_ids)
        if not bindings:
            raise NoMatchingBinding("No matching bindings found.")

        endpoints = policy.endpoints(tree, bindings)
        if not endpoints:
            raise NoValidEndpoint("No valid WS-Trust endpoints found.")
        elif len(endpoints) > 1:
            _log.warning("Multiple WS-Trust endpoints were found in the mex response. "
                         "Only one was used.")

        address, binding = endpoints[0]
        _log.debug(f"WS-Trust endpoint: {address}, binding: {binding}")
        return cls(address, binding)

    @property
    def url(self) -> str:
        return self.wstrust_url.geturl()

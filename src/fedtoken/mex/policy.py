"""XPath queries used when matching username token policies in a MEX document."""
from typing import List
from typing import Tuple

from fedtoken.defaults import ADDRESS_XPATH
from fedtoken.defaults import BINDING_XPATH
from fedtoken.defaults import NAMESPACES
from fedtoken.defaults import POLICY_ID_XPATH
from fedtoken.defaults import POLICY_REFERENCE_XPATH
from fedtoken.defaults import PORT_XPATH

# lxml wants a real dict
NSMAP = dict(NAMESPACES)


def _first(values, default=""):
    if values:
        return str(values[0])
    return default


def policy_ids(tree) -> List[str]:
    """
    Find the policies that require a username token, either as signed supporting tokens
    or as signed encrypted supporting tokens.

    :param tree: A parsed MEX document
    :return: List of policy references on the form '#<Id>' in document order
    """
    res = []
    for _id in tree.xpath(POLICY_ID_XPATH, namespaces=NSMAP):
        _ref = f"#{_id}"
        if _ref not in res:
            res.append(_ref)
    return res


def bindings(tree, policy_refs: List[str]) -> List[str]:
    """
    Names of the WSDL bindings that refer to one of the given policies.

    :param tree: A parsed MEX document
    :param policy_refs: Policy references as returned by :py:func:`policy_ids`
    :return: List of binding names
    """
    res = []
    for node in tree.xpath(BINDING_XPATH, namespaces=NSMAP):
        _ref = _first(node.xpath(POLICY_REFERENCE_XPATH, namespaces=NSMAP))
        if _ref in policy_refs:
            _name = node.get("name")
            if _name:
                res.append(_name)
    return res


def endpoints(tree, binding_names: List[str]) -> List[Tuple[str, str]]:
    """
    Service ports using one of the bindings.

    :param tree: A parsed MEX document
    :param binding_names: Binding names as returned by :py:func:`bindings`
    :return: List of (address, binding name) tuples in document order
    """
    res = []
    for node in tree.xpath(PORT_XPATH, namespaces=NSMAP):
        _binding = node.get("binding", "").split(":")[-1]
        if _binding in binding_names:
            res.append((_first(node.xpath(ADDRESS_XPATH, namespaces=NSMAP)), _binding))
    return res

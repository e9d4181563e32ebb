import pytest
import requests
import responses
from lxml import etree

from fedtoken.defaults import ACTION_13
from fedtoken.defaults import ACTION_2005
from fedtoken.defaults import GRANT_TYPE_SAML1_1
from fedtoken.defaults import NAMESPACES
from fedtoken.exception import ConfigurationError
from fedtoken.exception import UnsupportedAction
from fedtoken.exception import WSTrustFault
from fedtoken.wstrust.request import WSTrustRequest
from tests.utils import xml_response

WSTRUST_URL = 'https://fs.contoso.com/adfs/services/trust/13/usernamemixed'
NSMAP = dict(NAMESPACES)
USERNAME = 'alice@contoso.com'
PASSWORD = 'a longesh password'


def _text(tree, xpath):
    return tree.xpath(xpath, namespaces=NSMAP)[0].text


def test_rst_13():
    _req = WSTrustRequest(WSTRUST_URL, ACTION_13)
    tree = etree.fromstring(_req.rst(USERNAME, PASSWORD))

    assert tree.tag == '{%s}Envelope' % NAMESPACES['s']
    assert _text(tree, '/s:Envelope/s:Header/wsa:Action') == ACTION_13
    assert _text(tree, '/s:Envelope/s:Header/wsa:To') == WSTRUST_URL
    assert _text(tree, '//wsse:UsernameToken/wsse:Username') == USERNAME
    assert _text(tree, '//wsse:UsernameToken/wsse:Password') == PASSWORD
    assert _text(tree, '//wsa:MessageID').startswith('urn:uuid:')
    assert _text(tree, '//u:Timestamp/u:Created') < _text(tree, '//u:Timestamp/u:Expires')

    rst = '/s:Envelope/s:Body/trust:RequestSecurityToken'
    assert _text(tree, f'{rst}/wsp:AppliesTo/wsa:EndpointReference/wsa:Address') == \
           'urn:federation:MicrosoftOnline'
    assert _text(tree, f'{rst}/trust:KeyType') == \
           'http://docs.oasis-open.org/ws-sx/ws-trust/200512/Bearer'
    assert _text(tree, f'{rst}/trust:RequestType') == \
           'http://docs.oasis-open.org/ws-sx/ws-trust/200512/Issue'


def test_rst_2005():
    _req = WSTrustRequest('https://fs.contoso.com/adfs/services/trust/2005/usernamemixed',
                          ACTION_2005, applies_to='urn:federation:example')
    tree = etree.fromstring(_req.rst(USERNAME, PASSWORD))

    rst = '/s:Envelope/s:Body/t:RequestSecurityToken'
    assert tree.xpath(rst, namespaces=NSMAP)
    assert _text(tree, f'{rst}/t:KeyType') == \
           'http://schemas.xmlsoap.org/ws/2005/05/identity/NoProofKey'
    assert _text(tree, f'{rst}/wsp:AppliesTo//wsa:Address') == 'urn:federation:example'


def test_rst_escapes_credentials():
    _req = WSTrustRequest(WSTRUST_URL, ACTION_13)
    tree = etree.fromstring(_req.rst(USERNAME, '<&>"'))
    assert _text(tree, '//wsse:Password') == '<&>"'


@pytest.mark.parametrize('action', [None, 'urn:unknown:action'])
def test_unsupported_action(action):
    with pytest.raises(UnsupportedAction):
        WSTrustRequest(WSTRUST_URL, action)


def test_insecure_endpoint():
    with pytest.raises(ConfigurationError):
        WSTrustRequest('http://fs.contoso.com/adfs/services/trust/13/usernamemixed', ACTION_13)


def test_execute():
    with responses.RequestsMock() as rsps:
        xml_response(rsps, 'POST', WSTRUST_URL, 'wstrust', 'rstr_13.xml')
        _resp = WSTrustRequest(WSTRUST_URL, ACTION_13).execute(USERNAME, PASSWORD)

        assert len(rsps.calls) == 1
        _request = rsps.calls[0].request
        assert _request.headers['SOAPAction'] == ACTION_13
        assert _request.headers['Content-Type'].startswith('application/soap+xml')

    assert 'AssertionID="_assertion13"' in _resp.token
    assert _resp.grant_type == GRANT_TYPE_SAML1_1


def test_execute_fault():
    with responses.RequestsMock() as rsps:
        xml_response(rsps, 'POST', WSTRUST_URL, 'wstrust', 'fault.xml', status=500)
        with pytest.raises(WSTrustFault) as err:
            WSTrustRequest(WSTRUST_URL, ACTION_13).execute(USERNAME, PASSWORD)

    assert err.value.fault_code == 'a:FailedAuthentication'
    assert err.value.reason.startswith('MSIS3127')


def test_execute_server_error():
    with responses.RequestsMock() as rsps:
        rsps.add('POST', WSTRUST_URL, body='Internal Server Error', status=500)
        with pytest.raises(requests.HTTPError):
            WSTrustRequest(WSTRUST_URL, ACTION_13).execute(USERNAME, PASSWORD)

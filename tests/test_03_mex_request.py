import pytest
import requests
import responses

from fedtoken.defaults import ACTION_13
from fedtoken.exception import ConfigurationError
from fedtoken.exception import NoMatchingPolicy
from fedtoken.mex.request import MexRequest
from tests.utils import read_data
from tests.utils import xml_response

MEX_URL = 'https://fs.contoso.com/adfs/services/trust/mex'


def test_execute():
    with responses.RequestsMock() as rsps:
        xml_response(rsps, 'GET', MEX_URL, 'mex', 'single_endpoint.xml')
        mex = MexRequest(MEX_URL).execute()
        assert len(rsps.calls) == 1

    assert mex.url == 'https://fs.contoso.com/adfs/services/trust/13/usernamemixed'
    assert mex.action == ACTION_13


def test_execute_parse_error():
    with responses.RequestsMock() as rsps:
        xml_response(rsps, 'GET', MEX_URL, 'mex', 'no_username_policy.xml')
        with pytest.raises(NoMatchingPolicy):
            MexRequest(MEX_URL).execute()


def test_http_error():
    with responses.RequestsMock() as rsps:
        rsps.add('GET', MEX_URL, body='Not Found', status=404)
        with pytest.raises(requests.HTTPError):
            MexRequest(MEX_URL).execute()


def test_insecure_mex_url():
    with pytest.raises(ConfigurationError):
        MexRequest('http://fs.contoso.com/adfs/services/trust/mex')


def test_injected_http_client():
    calls = []

    def http_cli(method, url, **kwargs):
        calls.append((method, url, kwargs))
        response = requests.Response()
        response.status_code = 200
        response._content = read_data('mex', 'single_endpoint.xml')
        response.headers['Content-Type'] = 'application/soap+xml'
        return response

    mex = MexRequest(MEX_URL, http_cli=http_cli,
                     httpc_params={'verify': True, 'timeout': 5}).execute()

    assert mex.action == ACTION_13
    assert calls == [('GET', MEX_URL, {'verify': True, 'timeout': 5})]

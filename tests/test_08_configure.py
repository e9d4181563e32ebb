import json

import pytest

from fedtoken.configure import FedTokenConfiguration
from fedtoken.configure import load_configuration
from fedtoken.defaults import DEFAULT_APPLIES_TO
from fedtoken.defaults import DEFAULT_AUTHORITY_HOST
from fedtoken.exception import ConfigurationError


def test_defaults():
    conf = FedTokenConfiguration({})
    assert conf.authority_host == DEFAULT_AUTHORITY_HOST
    assert conf.applies_to == DEFAULT_APPLIES_TO
    assert conf.scope == 'openid'
    assert conf.httpc_params == {'verify': True, 'timeout': 30}


def test_httpc_params_are_merged():
    conf = FedTokenConfiguration({'httpc_params': {'verify': False}})
    assert conf.httpc_params == {'verify': False, 'timeout': 30}


@pytest.mark.parametrize('host', ['', 'https://login.example.org/', 'login.example.org/tenant'])
def test_bad_authority_host(host):
    with pytest.raises(ConfigurationError):
        FedTokenConfiguration({'authority_host': host})


def test_load_configuration(tmp_path):
    _file = tmp_path / 'conf.json'
    _file.write_text(json.dumps({
        'authority_host': 'login.example.org',
        'applies_to': 'urn:federation:example'
    }))
    conf = load_configuration(str(_file))
    assert conf.authority_host == 'login.example.org'
    assert conf.applies_to == 'urn:federation:example'

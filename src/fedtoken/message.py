""" Messages exchanged with the identity provider during account type discovery and the
parameter sets handed on to the token endpoint."""
from idpyoidc.message import Message
from idpyoidc.message import SINGLE_OPTIONAL_STRING
from idpyoidc.message import SINGLE_REQUIRED_STRING


class UserRealmResponse(Message):
    """Response from the user realm discovery endpoint."""
    c_param = {
        "ver": SINGLE_OPTIONAL_STRING,
        "account_type": SINGLE_REQUIRED_STRING,
        "domain_name": SINGLE_OPTIONAL_STRING,
        "federation_protocol": SINGLE_OPTIONAL_STRING,
        "federation_metadata_url": SINGLE_OPTIONAL_STRING,
        "federation_active_auth_url": SINGLE_OPTIONAL_STRING,
        "cloud_instance_name": SINGLE_OPTIONAL_STRING,
        "cloud_audience_urn": SINGLE_OPTIONAL_STRING,
    }


class AssertionTokenRequest(Message):
    """Token request parameters for a federated user."""
    c_param = {
        "assertion": SINGLE_REQUIRED_STRING,
        "grant_type": SINGLE_REQUIRED_STRING,
        "scope": SINGLE_REQUIRED_STRING,
    }


class PasswordTokenRequest(Message):
    """Token request parameters for a managed user."""
    c_param = {
        "username": SINGLE_REQUIRED_STRING,
        "password": SINGLE_REQUIRED_STRING,
        "grant_type": SINGLE_REQUIRED_STRING,
        "scope": SINGLE_REQUIRED_STRING,
    }

from types import MappingProxyType

NAMESPACES = MappingProxyType({
    "s": "http://www.w3.org/2003/05/soap-envelope",
    "soap12": "http://schemas.xmlsoap.org/wsdl/soap12/",
    "sp": "http://schemas.xmlsoap.org/ws/2005/07/securitypolicy",
    "ssp": "http://docs.oasis-open.org/ws-sx/ws-securitypolicy/200702",
    "t": "http://schemas.xmlsoap.org/ws/2005/02/trust",
    "trust": "http://docs.oasis-open.org/ws-sx/ws-trust/200512",
    "u": "http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-utility-1.0.xsd",
    "wsa": "http://www.w3.org/2005/08/addressing",
    "wsdl": "http://schemas.xmlsoap.org/wsdl/",
    "wsp": "http://schemas.xmlsoap.org/ws/2004/09/policy",
    "wsse": "http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-secext-1.0.xsd",
    "saml": "urn:oasis:names:tc:SAML:1.0:assertion",
})

POLICY_ID_XPATH = (
    "//wsdl:definitions/wsp:Policy[./wsp:ExactlyOne/wsp:All/sp:SignedSupportingTokens"
    "/wsp:Policy/sp:UsernameToken/wsp:Policy/sp:WssUsernameToken10]/@u:Id"
    "|//wsdl:definitions/wsp:Policy[./wsp:ExactlyOne/wsp:All/ssp:SignedEncryptedSupportingTokens"
    "/wsp:Policy/ssp:UsernameToken/wsp:Policy/ssp:WssUsernameToken10]/@u:Id"
)
BINDING_XPATH = "//wsdl:definitions/wsdl:binding[./wsp:PolicyReference]"
POLICY_REFERENCE_XPATH = "./wsp:PolicyReference/@URI"
PORT_XPATH = "//wsdl:definitions/wsdl:service/wsdl:port"
ADDRESS_XPATH = "./soap12:address/@location"

WSTRUST_2005 = "2005"
WSTRUST_13 = "1.3"

ACTION_2005 = "http://schemas.xmlsoap.org/ws/2005/02/trust/RST/Issue"
ACTION_13 = "http://docs.oasis-open.org/ws-sx/ws-trust/200512/RST/Issue"

BINDING_TO_ACTION = MappingProxyType({
    "UserNameWSTrustBinding_IWSTrustFeb2005Async": ACTION_2005,
    "UsernameWSTrustBinding_IWSTrust13Async": ACTION_13,
})

ACTION_TO_WSTRUST_VERSION = MappingProxyType({
    ACTION_2005: WSTRUST_2005,
    ACTION_13: WSTRUST_13,
})

# Per WS-Trust version: (namespace prefix, KeyType, RequestType)
WSTRUST_RST_PARAMETERS = MappingProxyType({
    WSTRUST_2005: ("t",
                   "http://schemas.xmlsoap.org/ws/2005/05/identity/NoProofKey",
                   "http://schemas.xmlsoap.org/ws/2005/02/trust/Issue"),
    WSTRUST_13: ("trust",
                 "http://docs.oasis-open.org/ws-sx/ws-trust/200512/Bearer",
                 "http://docs.oasis-open.org/ws-sx/ws-trust/200512/Issue"),
})

SAML_TOKEN_TYPE_V1 = "urn:oasis:names:tc:SAML:1.0:assertion"
SAML_TOKEN_TYPE_V2 = "urn:oasis:names:tc:SAML:2.0:assertion"
WSS_SAML_TOKEN_PROFILE_V1_1 = \
    "http://docs.oasis-open.org/wss/oasis-wss-saml-token-profile-1.1#SAMLV1.1"
WSS_SAML_TOKEN_PROFILE_V2 = \
    "http://docs.oasis-open.org/wss/oasis-wss-saml-token-profile-1.1#SAMLV2.0"

GRANT_TYPE_SAML1_1 = "urn:ietf:params:oauth:grant-type:saml1_1-bearer"
GRANT_TYPE_SAML2 = "urn:ietf:params:oauth:grant-type:saml2-bearer"

TOKEN_TYPE_TO_GRANT_TYPE = MappingProxyType({
    SAML_TOKEN_TYPE_V1: GRANT_TYPE_SAML1_1,
    WSS_SAML_TOKEN_PROFILE_V1_1: GRANT_TYPE_SAML1_1,
    SAML_TOKEN_TYPE_V2: GRANT_TYPE_SAML2,
    WSS_SAML_TOKEN_PROFILE_V2: GRANT_TYPE_SAML2,
})

ANONYMOUS_ADDRESS = "http://www.w3.org/2005/08/addressing/anonymous"
SOAP_CONTENT_TYPE = "application/soap+xml; charset=utf-8"
RST_LIFETIME = 600

DEFAULT_AUTHORITY_HOST = "login.windows.net"
USER_REALM_PATH = "/common/UserRealm/{}"
USER_REALM_API_VERSION = "1.0"
DEFAULT_APPLIES_TO = "urn:federation:MicrosoftOnline"
DEFAULT_SCOPE = "openid"
PASSWORD_GRANT = "password"

DEFAULT_HTTPC_PARAMS = {"verify": True, "timeout": 30}

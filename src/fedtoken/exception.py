class FedTokenError(Exception):
    pass


class ProtocolError(FedTokenError):
    kind = "ProtocolError"


class MalformedDocument(ProtocolError):
    kind = "MalformedDocument"


class NoMatchingPolicy(ProtocolError):
    kind = "NoMatchingPolicy"


class NoMatchingBinding(ProtocolError):
    kind = "NoMatchingBinding"


class NoValidEndpoint(ProtocolError):
    kind = "NoValidEndpoint"


class UnsupportedAction(ProtocolError):
    kind = "UnsupportedAction"


class UnparsableTokenResponse(ProtocolError):
    kind = "UnparsableTokenResponse"


class WSTrustFault(ProtocolError):
    kind = "WSTrustFault"

    def __init__(self, fault_code, reason=""):
        ProtocolError.__init__(self, f"{fault_code}: {reason}")
        self.fault_code = fault_code
        self.reason = reason


class ConfigurationError(FedTokenError):
    pass


class UnsupportedAccountTypeError(FedTokenError):
    pass


class DiscoveryError(FedTokenError):
    pass

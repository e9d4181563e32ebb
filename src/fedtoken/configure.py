from typing import Dict
from typing import Optional

from idpyoidc.configure import Base
from idpyoidc.util import load_config_file

from fedtoken.defaults import DEFAULT_APPLIES_TO
from fedtoken.defaults import DEFAULT_AUTHORITY_HOST
from fedtoken.defaults import DEFAULT_HTTPC_PARAMS
from fedtoken.defaults import DEFAULT_SCOPE
from fedtoken.exception import ConfigurationError


class FedTokenConfiguration(Base):
    """Configuration for obtaining token request parameters for a user."""

    def __init__(self,
                 conf: Dict,
                 base_path: Optional[str] = ""):
        Base.__init__(self, conf, base_path=base_path)

        self.authority_host = conf.get("authority_host", DEFAULT_AUTHORITY_HOST)
        if not self.authority_host or "/" in self.authority_host:
            raise ConfigurationError(f"Not a host name: '{self.authority_host}'")

        self.applies_to = conf.get("applies_to", DEFAULT_APPLIES_TO)
        self.scope = conf.get("scope", DEFAULT_SCOPE)

        _params = DEFAULT_HTTPC_PARAMS.copy()
        _params.update(conf.get("httpc_params", {}))
        self.httpc_params = _params


def load_configuration(filename: str, base_path: Optional[str] = "") -> FedTokenConfiguration:
    """
    Read a JSON or YAML configuration file.

    :param filename: Path to the file
    :param base_path: Where relative paths in the configuration start from
    :return: A FedTokenConfiguration instance
    """
    return FedTokenConfiguration(load_config_file(filename), base_path=base_path)

"""Connection settings for the Confluence Data Center instance.

Settings are read from environment variables, optionally populated from a
.env file with python-dotenv. The bearer token is always required, plus
either a hostname or a full API base path. The base path wins when both are
present.

Environment variables:
    CONFLUENCE_API_TOKEN: Personal access token sent as a bearer token
    CONFLUENCE_HOST: Hostname of the instance (e.g., "confluence.example.com")
    CONFLUENCE_API_BASE_PATH: Full base URL (e.g., "https://host.com/wiki/")
"""

import os
from typing import List, Mapping, NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

ENV_API_TOKEN = 'CONFLUENCE_API_TOKEN'
ENV_HOST = 'CONFLUENCE_HOST'
ENV_API_BASE_PATH = 'CONFLUENCE_API_BASE_PATH'


class ConnectionSettings(NamedTuple):
    """Immutable connection settings for a ContentGateway."""
    token: str
    host: Optional[str] = None
    base_path: Optional[str] = None


def validate_config(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the names of required settings missing from the environment.

    Empty values count as missing. This never raises; the caller decides
    whether a non-empty result is fatal.

    Args:
        environ: Mapping to inspect (defaults to os.environ)

    Returns:
        List of missing setting names, empty when configuration is sufficient

    Example:
        >>> validate_config({})
        ['CONFLUENCE_API_TOKEN', 'CONFLUENCE_HOST or CONFLUENCE_API_BASE_PATH']
    """
    env = os.environ if environ is None else environ
    missing = []

    if not env.get(ENV_API_TOKEN):
        missing.append(ENV_API_TOKEN)

    if not env.get(ENV_HOST) and not env.get(ENV_API_BASE_PATH):
        missing.append(f'{ENV_HOST} or {ENV_API_BASE_PATH}')

    return missing


def load_settings(env_file: Optional[str] = None) -> ConnectionSettings:
    """Load connection settings from the environment.

    Args:
        env_file: Optional path to a .env file (defaults to searching for .env)

    Returns:
        ConnectionSettings with host dropped when a base path is configured

    Raises:
        ConfigurationError: If any required setting is missing
    """
    load_dotenv(env_file)

    missing = validate_config()
    if missing:
        raise ConfigurationError.for_missing(missing)

    base_path = os.getenv(ENV_API_BASE_PATH) or None
    host = None if base_path else os.getenv(ENV_HOST)

    return ConnectionSettings(
        token=os.environ[ENV_API_TOKEN],
        host=host,
        base_path=base_path,
    )

"""
Configuration loading.

Values come from the process environment, optionally pre-populated from a
dotenv file. The result is an immutable Configuration that every step
receives explicitly.
"""

import logging
import os
from typing import MutableMapping, Mapping, NamedTuple, Optional

from dotenv import dotenv_values

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

# Field name -> environment variable
ENV_VARS = {
    "region": "AWS_REGION",
    "access_key_id": "AWS_ACCESS_KEY_ID",
    "secret_access_key": "AWS_SECRET_ACCESS_KEY",
    "key_name": "KEY_NAME",
    "public_key_path": "PUBLIC_KEY_PATH",
    "ami_id": "AMI_ID",
    "instance_type": "INSTANCE_TYPE",
}

# Checked before the EC2 client is built, in this order
EAGER_FIELDS = ("region", "access_key_id", "secret_access_key")


def load_env_file(
    path: str = DEFAULT_ENV_FILE,
    environ: Optional[MutableMapping[str, str]] = None,
) -> bool:
    """
    Merge a dotenv file into the environment.

    Variables that are already set are left alone. A missing or unreadable
    file is not an error; the process environment is used as-is.

    Args:
        path: Path to the dotenv file
        environ: Mapping to merge into (defaults to os.environ)

    Returns:
        bool: True if the file was loaded
    """
    if environ is None:
        environ = os.environ

    if not os.path.exists(path):
        print(f"Info: .env file does not exist at: {path}. "
              "Falling back to system environment variables.")
        return False

    try:
        values = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            "Could not load .env file: %s. Falling back to system environment variables.", e
        )
        return False

    for key, value in values.items():
        if value is not None and key not in environ:
            environ[key] = value

    print(f"Using .env file at: {path}")
    return True


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class Configuration(NamedTuple):
    """Resolved provisioning settings. Blank values are stored as None."""
    region: str
    access_key_id: str
    secret_access_key: str
    key_name: Optional[str] = None
    public_key_path: Optional[str] = None
    ami_id: Optional[str] = None
    instance_type: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """
        Build a Configuration from environment variables.

        Region, access key id and secret access key are validated here;
        the remaining fields are validated by the step that needs them.

        Raises:
            ConfigurationError: If one of the eager variables is blank
        """
        if environ is None:
            environ = os.environ

        values = {field: _clean(environ.get(var)) for field, var in ENV_VARS.items()}
        for field in EAGER_FIELDS:
            if values[field] is None:
                raise ConfigurationError(f"{ENV_VARS[field]} environment variable is not set")

        return cls(**values)

    def require(self, field: str) -> str:
        """Return a field's value, or raise ConfigurationError if it is unset."""
        value = getattr(self, field)
        if value is None:
            raise ConfigurationError(f"{ENV_VARS[field]} environment variable is not set")
        return value

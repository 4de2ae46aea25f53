import logging
import os
from pathlib import Path

from botocore.exceptions import ClientError

from ..config import Configuration
from ..errors import KeyMaterialError, KeyPairImportError

logger = logging.getLogger(__name__)


def expand_path(path: str) -> str:
    """
    Expand a leading ~ to the current user's home directory.

    Both "~/id.pub" and "~id.pub" resolve to "<home>/id.pub". Paths that
    don't start with ~ are returned unchanged.

    Args:
        path: The path to expand

    Returns:
        str: The expanded path

    Raises:
        KeyMaterialError: If the home directory can't be determined
    """
    if not path.startswith("~"):
        return path

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise KeyMaterialError(f"failed to expand public key path: {e}") from e

    remainder = path[1:].lstrip("/" + os.sep)
    if not remainder:
        return str(home)
    return os.path.join(str(home), remainder)


def import_key_pair(client, config: Configuration) -> str:
    """
    Import a key pair into EC2 from a local public key file.

    The file is sent as-is; it is not parsed or validated locally. EC2
    rejects the import if a key pair with the same name already exists.

    Args:
        client: EC2 client
        config: Configuration providing KEY_NAME and PUBLIC_KEY_PATH

    Returns:
        str: The imported key pair name

    Raises:
        ConfigurationError: If KEY_NAME or PUBLIC_KEY_PATH is unset
        KeyMaterialError: If the key file can't be located or read
        KeyPairImportError: If EC2 rejects the import
    """
    key_name = config.require("key_name")
    public_key_path = expand_path(config.require("public_key_path"))

    try:
        with open(public_key_path, "rb") as f:
            public_key_material = f.read()
    except OSError as e:
        raise KeyMaterialError(f"failed to read public key file: {e}") from e

    logger.debug("Calling ImportKeyPair for %s (%d bytes)", key_name, len(public_key_material))
    try:
        client.import_key_pair(
            KeyName=key_name,
            PublicKeyMaterial=public_key_material,
        )
    except ClientError as e:
        raise KeyPairImportError(f"failed to import key pair: {e}") from e

    print(f"Key pair '{key_name}' created successfully from public key file.")
    return key_name

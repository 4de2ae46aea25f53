"""
Errors raised while provisioning.

Every failure the provisioner reports on its own derives from
ProvisionerError. Errors returned by the EC2 API stay as botocore
exceptions until the workflow wraps them in a StepFailedError.
"""


class ProvisionerError(Exception):
    """Base class for provisioning failures."""


class ConfigurationError(ProvisionerError):
    """A required environment variable is missing or blank."""


class ClientCreationError(ProvisionerError):
    """The boto3 session or EC2 client could not be built."""


class KeyMaterialError(ProvisionerError):
    """The public key path could not be expanded or read."""


class KeyPairImportError(ProvisionerError):
    """EC2 rejected the key pair import."""


class ResourceNotFoundError(ProvisionerError):
    """A lookup that must return something came back empty."""


class InstanceLaunchError(ProvisionerError):
    """RunInstances succeeded but returned no instances."""


class StepFailedError(ProvisionerError):
    """A workflow step failed; wraps the underlying cause."""

    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to {step}: {cause}")

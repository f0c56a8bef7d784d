"""
Errors raised by the HTS token flow.

Mirror node failures are not wrapped: requests and JSON decoding errors
surface as-is to the management command.
"""


class HtsError(Exception):
    """Base class for HTS script failures"""


class HederaConfigurationError(HtsError):
    """Operator credentials are missing from the environment"""


class TokenCreationError(HtsError):
    """The token create receipt came back with a non-SUCCESS status"""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Token creation transaction failed with status: {status}")

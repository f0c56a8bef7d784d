"""
Centralized Hedera configuration.
Network settings come from Django settings; operator credentials are read
from the environment at call time so a missing key fails before any client
is built.
"""
from dataclasses import dataclass

from decouple import config
from django.conf import settings

from .constants import OPERATOR_ACCOUNT_ID_ENV, OPERATOR_PRIVATE_KEY_ENV
from .exceptions import HederaConfigurationError


@dataclass(frozen=True)
class OperatorCredentials:
    account_id: str
    private_key: str

    def __repr__(self):
        return f"OperatorCredentials(account_id={self.account_id!r}, private_key='***')"


def load_operator_credentials() -> OperatorCredentials:
    """Read the operator account id and ECDSA key, failing fast if either is unset"""
    account_id = config(OPERATOR_ACCOUNT_ID_ENV, default='').strip()
    private_key = config(OPERATOR_PRIVATE_KEY_ENV, default='').strip()
    if not account_id or not private_key:
        raise HederaConfigurationError(
            f"Must set {OPERATOR_ACCOUNT_ID_ENV} and {OPERATOR_PRIVATE_KEY_ENV} environment variables"
        )
    return OperatorCredentials(account_id=account_id, private_key=private_key)


def get_network():
    """Get current network (testnet/previewnet/mainnet)"""
    return settings.HEDERA_NETWORK


def get_fee_ceilings():
    """Get the (max transaction fee, max query payment) pair in HBAR"""
    return (
        settings.HEDERA_MAX_TRANSACTION_FEE_HBAR,
        settings.HEDERA_MAX_QUERY_PAYMENT_HBAR,
    )


def hashscan_transaction_url(transaction_id) -> str:
    return f"{settings.HASHSCAN_URL.rstrip('/')}/transaction/{transaction_id}"


def hashscan_token_url(token_id) -> str:
    return f"{settings.HASHSCAN_URL.rstrip('/')}/token/{token_id}"

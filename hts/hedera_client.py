"""
Hedera network session built on hiero-sdk-python.

The SDK client holds open gRPC channels, so it is only ever handed out inside
a `with HederaClient(...)` block and closed exactly once on the way out.
"""
import logging
from typing import Optional

from hiero_sdk_python import AccountId, Client, Hbar, Network, PrivateKey

from .hedera_config import OperatorCredentials, get_fee_ceilings, get_network

logger = logging.getLogger(__name__)


class HederaClient:
    """
    Operator-bound Hedera client with fee ceilings
    """

    def __init__(
        self,
        credentials: OperatorCredentials,
        network: Optional[str] = None,
        max_transaction_fee: Optional[int] = None,
        max_query_payment: Optional[int] = None,
    ):
        default_fee, default_query_payment = get_fee_ceilings()
        self.network = network or get_network()
        # Ceilings in HBAR; the SDK rejects anything that would exceed them
        self.max_transaction_fee = Hbar(max_transaction_fee if max_transaction_fee is not None else default_fee)
        self.max_query_payment = Hbar(max_query_payment if max_query_payment is not None else default_query_payment)

        self.operator_id = AccountId.from_string(credentials.account_id)
        self.operator_key = PrivateKey.from_string_ecdsa(credentials.private_key)

        self._client = None
        self._closed = False

    def open(self) -> 'HederaClient':
        client = Client(Network(network=self.network))
        client.set_operator(self.operator_id, self.operator_key)
        client.set_default_max_query_payment(self.max_query_payment)
        self._client = client
        logger.info(
            "Hedera client ready on %s (operator=%s, max fee=%s, max query payment=%s)",
            self.network, self.operator_id, self.max_transaction_fee, self.max_query_payment,
        )
        return self

    def close(self):
        if self._client is None or self._closed:
            return
        self._closed = True
        self._client.close()
        logger.debug("Hedera client closed")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def client(self) -> Client:
        if self._client is None or self._closed:
            raise RuntimeError("Hedera client is not open")
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._closed

    def freeze(self, transaction):
        """Stamp the fee ceiling on a transaction and lock its body"""
        transaction.transaction_fee = self.max_transaction_fee.to_tinybars()
        return transaction.freeze_with(self.client)

    def sign(self, transaction):
        return transaction.sign(self.operator_key)

    def execute(self, transaction):
        """Submit a frozen, signed transaction and block until its receipt is available"""
        return transaction.execute(self.client)

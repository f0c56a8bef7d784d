"""
Hedera Token Service (HTS) fungible token issuance and mirror node verification.

Issuance is strictly freeze -> sign -> execute: the signature covers the frozen
body bytes, and execute blocks until the network hands back a receipt.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings
from hiero_sdk_python import ResponseCode, TokenCreateTransaction, TokenType

from . import __version__
from .constants import (
    MIN_MIRROR_PROPAGATION_DELAY,
    SCRIPT_ID,
    SUCCESS_STATUS,
    TOKEN_DECIMALS,
    TOKEN_INITIAL_SUPPLY,
)
from .exceptions import TokenCreationError
from .hedera_client import HederaClient
from .mirror_node import MirrorNodeClient, MirrorTokenRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenSpec:
    memo: str
    name: str
    symbol: str
    treasury_account_id: Any
    token_type: Any = TokenType.FUNGIBLE_COMMON
    decimals: int = TOKEN_DECIMALS
    initial_supply: int = TOKEN_INITIAL_SUPPLY
    freeze_default: bool = False


@dataclass(frozen=True)
class TokenCreationResult:
    token_id: str
    transaction_id: str
    status: str


def build_token_spec(treasury_account_id, script_id: str = SCRIPT_ID, version: str = __version__) -> TokenSpec:
    """Token parameters for the demo coin; the operator is also the treasury"""
    return TokenSpec(
        memo=f"Hello Future World token - {version}",
        name=f"{script_id} coin",
        symbol=script_id.upper(),
        treasury_account_id=treasury_account_id,
    )


def receipt_status_name(status) -> str:
    """Render a receipt status as its response code name, e.g. 'SUCCESS'"""
    if isinstance(status, str):
        return status
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


class HtsTokenService:
    """
    Creates fungible tokens through an open HederaClient and reads them back
    from the mirror node
    """

    def __init__(self, session: HederaClient, mirror: Optional[MirrorNodeClient] = None):
        self.session = session
        self.mirror = mirror or MirrorNodeClient()

    def build_transaction(self, spec: TokenSpec) -> TokenCreateTransaction:
        return (
            TokenCreateTransaction()
            .set_transaction_memo(spec.memo)
            .set_token_type(spec.token_type)
            .set_token_name(spec.name)
            .set_token_symbol(spec.symbol)
            .set_decimals(spec.decimals)
            .set_initial_supply(spec.initial_supply)
            .set_treasury_account_id(spec.treasury_account_id)
            .set_freeze_default(spec.freeze_default)
        )

    def create_fungible_token(self, spec: TokenSpec) -> TokenCreationResult:
        """
        Submit a token create transaction and wait for its receipt.

        Raises:
            TokenCreationError: if the receipt status is anything but SUCCESS
        """
        transaction = self.session.freeze(self.build_transaction(spec))
        transaction_id = str(transaction.transaction_id)
        logger.info("The token create transaction ID: %s", transaction_id)

        signed = self.session.sign(transaction)
        receipt = self.session.execute(signed)

        status = receipt_status_name(receipt.status)
        if status != SUCCESS_STATUS:
            logger.error("Token create %s failed with status %s", transaction_id, status)
            raise TokenCreationError(status)

        token_id = str(receipt.token_id)
        logger.info("Token created successfully. Token ID: %s", token_id)
        return TokenCreationResult(token_id=token_id, transaction_id=transaction_id, status=status)

    def wait_for_mirror_propagation(self, delay: Optional[int] = None) -> int:
        """Fixed sleep so the record file reaches the mirror nodes; never shorter than the minimum"""
        if delay is None:
            delay = settings.HEDERA_MIRROR_PROPAGATION_DELAY
        delay = max(delay, MIN_MIRROR_PROPAGATION_DELAY)
        logger.debug("Waiting %ss for mirror node propagation", delay)
        time.sleep(delay)
        return delay

    def verify_token(self, token_id, delay: Optional[int] = None) -> MirrorTokenRecord:
        """Wait out propagation, then read the token back once from the mirror node"""
        self.wait_for_mirror_propagation(delay)
        record = self.mirror.get_token(token_id)
        logger.info("The name of this token: %s", record.name)
        logger.info("The total supply of this token: %s", record.total_supply)
        return record

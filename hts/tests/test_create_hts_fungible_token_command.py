import os
from io import StringIO
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings
from hiero_sdk_python import ResponseCode

from hts.mirror_node import MirrorTokenRecord

COMMAND_MODULE = 'hts.management.commands.create_hts_fungible_token'

OPERATOR_ENV = {
    'OPERATOR_ACCOUNT_ID': '0.0.4501',
    'OPERATOR_ACCOUNT_PRIVATE_KEY': '0x' + 'ab' * 32,
}


class FakeHederaClient:
    """Minimal stub for the Hedera session used by the command."""

    instances = []
    receipts = []

    def __init__(self, credentials):
        self.credentials = credentials
        self.operator_id = credentials.account_id
        self.close_calls = 0
        self.calls = []
        FakeHederaClient.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_calls += 1

    def freeze(self, transaction):
        self.calls.append('freeze')
        return SimpleNamespace(transaction_id=f'0.0.4501@1700000000.00000000{len(self.instances)}')

    def sign(self, transaction):
        self.calls.append('sign')
        return transaction

    def execute(self, transaction):
        self.calls.append('execute')
        return FakeHederaClient.receipts.pop(0)


class FakeMirrorNodeClient:

    records = {}
    events = None

    def __init__(self):
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    def token_url(self, token_id):
        return f'https://testnet.mirrornode.hedera.com/api/v1/tokens/{token_id}'

    def get_token(self, token_id):
        FakeMirrorNodeClient.events.append(('get_token', token_id))
        return FakeMirrorNodeClient.records.get(token_id, MirrorTokenRecord(token_id=token_id))


def receipt(status=ResponseCode.SUCCESS, token_id=None):
    return SimpleNamespace(status=status, token_id=token_id)


@override_settings(
    HASHSCAN_URL='https://hashscan.io/testnet',
    HEDERA_MIRROR_NODE_URL='https://testnet.mirrornode.hedera.com',
    HEDERA_MIRROR_PROPAGATION_DELAY=6,
)
class CreateHtsFungibleTokenCommandTest(SimpleTestCase):

    def setUp(self):
        FakeHederaClient.instances = []
        FakeHederaClient.receipts = []
        FakeMirrorNodeClient.records = {}
        FakeMirrorNodeClient.events = []

        patchers = [
            patch(f'{COMMAND_MODULE}.HederaClient', FakeHederaClient),
            patch(f'{COMMAND_MODULE}.MirrorNodeClient', FakeMirrorNodeClient),
            patch('hts.token_service.TokenCreateTransaction', self.transaction_factory),
            patch('hts.token_service.time.sleep', side_effect=self.record_sleep),
            patch.dict(os.environ, OPERATOR_ENV),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)

    @staticmethod
    def transaction_factory():
        transaction = MagicMock()
        for setter in (
            'set_transaction_memo', 'set_token_type', 'set_token_name', 'set_token_symbol',
            'set_decimals', 'set_initial_supply', 'set_treasury_account_id', 'set_freeze_default',
        ):
            getattr(transaction, setter).return_value = transaction
        return transaction

    @staticmethod
    def record_sleep(seconds):
        FakeMirrorNodeClient.events.append(('sleep', seconds))

    def run_command(self, *args):
        out, err = StringIO(), StringIO()
        call_command('create_hts_fungible_token', *args, stdout=out, stderr=err, no_color=True)
        return out.getvalue()

    def test_missing_env_fails_before_network(self):
        with patch.dict(os.environ, {'OPERATOR_ACCOUNT_ID': ''}):
            with self.assertRaises(CommandError) as ctx:
                self.run_command()

        self.assertIn('OPERATOR_ACCOUNT_ID', str(ctx.exception))
        self.assertIn('OPERATOR_ACCOUNT_PRIVATE_KEY', str(ctx.exception))
        self.assertEqual(FakeHederaClient.instances, [])
        self.assertEqual(FakeMirrorNodeClient.events, [])

    def test_success_prints_token_and_urls(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]
        FakeMirrorNodeClient.records['0.0.1234'] = MirrorTokenRecord(
            token_id='0.0.1234', name='htsFt coin', total_supply='1000000'
        )

        output = self.run_command()

        self.assertIn('Token ID: 0.0.1234', output)
        self.assertIn('https://hashscan.io/testnet/token/0.0.1234', output)
        self.assertIn('https://testnet.mirrornode.hedera.com/api/v1/tokens/0.0.1234', output)
        self.assertIn('https://hashscan.io/testnet/transaction/0.0.4501@', output)
        self.assertIn('The name of this token: htsFt coin', output)
        self.assertIn('The total supply of this token: 1000000', output)

        session = FakeHederaClient.instances[0]
        self.assertEqual(session.calls, ['freeze', 'sign', 'execute'])
        self.assertEqual(session.close_calls, 1)

    def test_failed_status_raises_and_releases_client(self):
        FakeHederaClient.receipts = [receipt(status=ResponseCode.INVALID_SIGNATURE)]

        with self.assertRaises(CommandError) as ctx:
            self.run_command()

        self.assertIn('INVALID_SIGNATURE', str(ctx.exception))
        self.assertEqual(FakeHederaClient.instances[0].close_calls, 1)
        # Nothing was waited on or fetched
        self.assertEqual(FakeMirrorNodeClient.events, [])

    def test_waits_before_mirror_query(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]

        self.run_command()

        self.assertEqual(FakeMirrorNodeClient.events, [('sleep', 6), ('get_token', '0.0.1234')])

    def test_delay_option_has_floor(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]

        self.run_command('--delay', '2')

        self.assertEqual(FakeMirrorNodeClient.events[0], ('sleep', 6))

    def test_missing_mirror_fields_print_none(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]

        output = self.run_command()

        self.assertIn('The name of this token: None', output)
        self.assertIn('The total supply of this token: None', output)

    def test_mirror_failure_propagates_and_releases_client(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]

        with patch.object(FakeMirrorNodeClient, 'get_token', side_effect=ValueError('Expecting value')):
            with self.assertRaises(CommandError) as ctx:
                self.run_command()

        self.assertIn('Expecting value', str(ctx.exception))
        self.assertEqual(FakeHederaClient.instances[0].close_calls, 1)

    def test_skip_verify(self):
        FakeHederaClient.receipts = [receipt(token_id='0.0.1234')]

        output = self.run_command('--skip-verify')

        self.assertIn('Skipping mirror node verification', output)
        self.assertEqual(FakeMirrorNodeClient.events, [])

    def test_each_run_creates_a_new_token(self):
        FakeHederaClient.receipts = [
            receipt(token_id='0.0.1234'),
            receipt(token_id='0.0.1235'),
        ]

        first = self.run_command('--skip-verify')
        second = self.run_command('--skip-verify')

        first_id = first.split('Token ID: ')[1].split()[0]
        second_id = second.split('Token ID: ')[1].split()[0]
        self.assertNotEqual(first_id, second_id)
        self.assertEqual(len(FakeHederaClient.instances), 2)

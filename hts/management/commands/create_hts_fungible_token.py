"""
Create a fungible HTS token on Hedera and verify it through the mirror node.

Usage:
  python manage.py create_hts_fungible_token
  python manage.py create_hts_fungible_token --delay 10
  python manage.py create_hts_fungible_token --skip-verify

Notes:
- Reads OPERATOR_ACCOUNT_ID and OPERATOR_ACCOUNT_PRIVATE_KEY (ECDSA) from the environment or .env.
- The operator pays the fees and is the token treasury.
- Every run creates a new token.
"""
import logging

from django.core.management.base import BaseCommand, CommandError

from hts.constants import SCRIPT_TITLE
from hts.hedera_client import HederaClient
from hts.hedera_config import hashscan_token_url, hashscan_transaction_url, load_operator_credentials
from hts.mirror_node import MirrorNodeClient
from hts.token_service import HtsTokenService, build_token_spec

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create a fungible HTS token on Hedera testnet and read it back from the mirror node.'

    def add_arguments(self, parser):
        parser.add_argument('--delay', type=int, default=None,
                            help='Seconds to wait for mirror node propagation (minimum 6)')
        parser.add_argument('--skip-verify', action='store_true',
                            help='Stop after the token is created; do not query the mirror node')

    def handle(self, *args, **options):
        try:
            self.create_and_verify(delay=options.get('delay'), skip_verify=options.get('skip_verify', False))
        except Exception as e:
            logger.exception("HTS fungible token script failed")
            self.stderr.write(self.style.ERROR(f'❌ {e}'))
            raise CommandError(str(e)) from e

    def section(self, title):
        self.stdout.write('')
        self.stdout.write(self.style.MIGRATE_HEADING('=' * 60))
        self.stdout.write(self.style.MIGRATE_HEADING(title))
        self.stdout.write(self.style.MIGRATE_HEADING('=' * 60))

    def url(self, label, url):
        self.stdout.write(label)
        self.stdout.write(self.style.HTTP_INFO(url))

    def create_and_verify(self, delay=None, skip_verify=False):
        self.stdout.write(self.style.SUCCESS(f'{SCRIPT_TITLE} - start'))

        credentials = load_operator_credentials()

        with HederaClient(credentials) as session, MirrorNodeClient() as mirror:
            self.stdout.write(f'Using account: {credentials.account_id}')
            service = HtsTokenService(session, mirror=mirror)

            self.section('Creating new HTS token')
            spec = build_token_spec(session.operator_id)
            result = service.create_fungible_token(spec)
            self.stdout.write(f'The token create transaction ID: {result.transaction_id}')
            self.stdout.write(self.style.SUCCESS(f'✅ Token created successfully. Token ID: {result.token_id}'))
            self.url('Transaction was successful. View it at:',
                     hashscan_transaction_url(result.transaction_id))

            self.section('View the token on HashScan')
            self.url('Paste URL in browser:', hashscan_token_url(result.token_id))

            if skip_verify:
                self.stdout.write(self.style.WARNING('Skipping mirror node verification'))
            else:
                self.section('Get token data from the Hedera Mirror Node')
                self.url('The token Hedera Mirror Node API URL:', mirror.token_url(result.token_id))
                record = service.verify_token(result.token_id, delay=delay)
                self.stdout.write(f'The name of this token: {record.name}')
                self.stdout.write(f'The total supply of this token: {record.total_supply}')

        self.stdout.write(self.style.SUCCESS(f'{SCRIPT_TITLE} - complete'))
        return result.token_id

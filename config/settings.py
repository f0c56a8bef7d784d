"""
Django settings for the HTS token scripts.

Everything tunable comes from the environment (or a `.env` file in the project
root or its parent) through python-decouple.
"""
from pathlib import Path

from decouple import config
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# Scripts historically kept the shared .env one level above the project
load_dotenv(BASE_DIR / '.env')
load_dotenv(BASE_DIR.parent / '.env')

SECRET_KEY = config('DJANGO_SECRET_KEY', default='hts-scripts-not-a-web-app')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'hts',
]

# No models; the scripts only talk to the ledger and the mirror node
DATABASES = {}

USE_TZ = True
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

from .logging import LOGGING  # noqa: E402,F401

# Hedera network
HEDERA_NETWORK = config('HEDERA_NETWORK', default='testnet')

# Fee ceilings, in HBAR
HEDERA_MAX_TRANSACTION_FEE_HBAR = config('HEDERA_MAX_TRANSACTION_FEE_HBAR', default=100, cast=int)
HEDERA_MAX_QUERY_PAYMENT_HBAR = config('HEDERA_MAX_QUERY_PAYMENT_HBAR', default=50, cast=int)

# Read side: mirror node REST API and the HashScan explorer
HEDERA_MIRROR_NODE_URL = config(
    'HEDERA_MIRROR_NODE_URL',
    default=f'https://{HEDERA_NETWORK}.mirrornode.hedera.com',
)
HEDERA_MIRROR_TIMEOUT = config('HEDERA_MIRROR_TIMEOUT', default=30, cast=int)
HEDERA_MIRROR_PROPAGATION_DELAY = config('HEDERA_MIRROR_PROPAGATION_DELAY', default=6, cast=int)
HASHSCAN_URL = config('HASHSCAN_URL', default=f'https://hashscan.io/{HEDERA_NETWORK}')

# Script identity used for the token name, symbol and log banners
SCRIPT_ID = 'htsFt'
SCRIPT_TITLE = 'Hello Future World - HTS Fungible Token'

# Environment variables holding the operator account
OPERATOR_ACCOUNT_ID_ENV = 'OPERATOR_ACCOUNT_ID'
OPERATOR_PRIVATE_KEY_ENV = 'OPERATOR_ACCOUNT_PRIVATE_KEY'

# Token defaults
TOKEN_DECIMALS = 2
TOKEN_INITIAL_SUPPLY = 1_000_000

# Receipt status name for a successful transaction
SUCCESS_STATUS = 'SUCCESS'

# Mirror nodes lag consensus by a few record files (blocks)
MIN_MIRROR_PROPAGATION_DELAY = 6

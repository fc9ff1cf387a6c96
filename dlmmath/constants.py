"""Protocol-wide limits and parameters of the liquidity-book pool."""

# Smallest step between bins is 0.01%, 1 bps.
BASIS_POINT_MAX = 10_000

# Maximum number of bins a bin array can contain.
MAX_BIN_PER_ARRAY = 70

# Maximum number of bins a position can contain.
MAX_BIN_PER_POSITION = 70

# Bin id limits, computed for a 1 bps bin step.
MIN_BIN_ID = -443_636
MAX_BIN_ID = 443_636

# Maximum fee rate: 10%.
MAX_FEE_RATE = 100_000_000

FEE_PRECISION = 1_000_000_000

# Maximum protocol share of the fee: 25%.
MAX_PROTOCOL_SHARE = 2_500

# Host fee: 20%.
HOST_FEE_BPS = 2_000

U24_MAX = 0xFFFFFF

# Number of rewards supported by a pool.
NUM_REWARDS = 2

MIN_REWARD_DURATION = 1

# One year: 365 * 24 * 3600 seconds.
MAX_REWARD_DURATION = 31_536_000

DEFAULT_OBSERVATION_LENGTH = 100

SAMPLE_LIFETIME = 120

EXTENSION_BINARRAY_BITMAP_SIZE = 12

BIN_ARRAY_BITMAP_SIZE = 512

# 100 bps, 1%.
MAX_BASE_FACTOR_STEP = 100

MAX_FEE_UPDATE_WINDOW = 0

MAX_REWARD_BIN_SPLIT = 15
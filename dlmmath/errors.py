"""Error codes raised by the pool arithmetic and parameter checks."""

from enum import Enum


class ErrorCode(Enum):
    """Every error the pool can report, with its number and message."""

    INVALID_START_BIN_INDEX = (6000, "Invalid start bin index")
    INVALID_BIN_ID = (6001, "Invalid bin id")
    INVALID_INPUT = (6002, "Invalid input data")
    EXCEEDED_AMOUNT_SLIPPAGE_TOLERANCE = (6003, "Exceeded amount slippage tolerance")
    EXCEEDED_BIN_SLIPPAGE_TOLERANCE = (6004, "Exceeded bin slippage tolerance")
    COMPOSITION_FACTOR_FLAWED = (6005, "Composition factor flawed")
    NON_PRESET_BIN_STEP = (6006, "Non preset bin step")
    ZERO_LIQUIDITY = (6007, "Zero liquidity")
    INVALID_POSITION = (6008, "Invalid position")
    BIN_ARRAY_NOT_FOUND = (6009, "Bin array not found")
    INVALID_TOKEN_MINT = (6010, "Invalid token mint")
    INVALID_ACCOUNT_FOR_SINGLE_DEPOSIT = (6011, "Invalid account for single deposit")
    PAIR_INSUFFICIENT_LIQUIDITY = (6012, "Pair insufficient liquidity")
    INVALID_FEE_OWNER = (6013, "Invalid fee owner")
    INVALID_FEE_WITHDRAW_AMOUNT = (6014, "Invalid fee withdraw amount")
    INVALID_ADMIN = (6015, "Invalid admin")
    IDENTICAL_FEE_OWNER = (6016, "Identical fee owner")
    INVALID_BPS = (6017, "Invalid basis point")
    MATH_OVERFLOW = (6018, "Math operation overflow")
    TYPE_CAST_FAILED = (6019, "Type cast error")
    INVALID_REWARD_INDEX = (6020, "Invalid reward index")
    INVALID_REWARD_DURATION = (6021, "Invalid reward duration")
    REWARD_INITIALIZED = (6022, "Reward already initialized")
    REWARD_UNINITIALIZED = (6023, "Reward not initialized")
    IDENTICAL_FUNDER = (6024, "Identical funder")
    REWARD_CAMPAIGN_IN_PROGRESS = (6025, "Reward campaign in progress")
    IDENTICAL_REWARD_DURATION = (6026, "Reward duration is the same")
    INVALID_BIN_ARRAY = (6027, "Invalid bin array")
    NON_CONTINUOUS_BIN_ARRAYS = (6028, "Bin arrays must be continuous")
    INVALID_REWARD_VAULT = (6029, "Invalid reward vault")
    NON_EMPTY_POSITION = (6030, "Position is not empty")
    UNAUTHORIZED_ACCESS = (6031, "Unauthorized access")
    INVALID_FEE_PARAMETER = (6032, "Invalid fee parameter")
    MISSING_ORACLE = (6033, "Missing oracle account")
    INSUFFICIENT_SAMPLE = (6034, "Insufficient observation sample")
    INVALID_LOOKUP_TIMESTAMP = (6035, "Invalid lookup timestamp")
    BITMAP_EXTENSION_ACCOUNT_IS_NOT_PROVIDED = (
        6036,
        "Bitmap extension account is not provided",
    )
    CANNOT_FIND_NON_ZERO_LIQUIDITY_BIN_ARRAY_ID = (
        6037,
        "Cannot find non-zero liquidity binArrayId",
    )
    BIN_ID_OUT_OF_BOUND = (6038, "Bin id out of bound")
    INSUFFICIENT_OUT_AMOUNT = (6039, "Insufficient amount in for minimum out")
    INVALID_POSITION_WIDTH = (6040, "Invalid position width")
    EXCESSIVE_FEE_UPDATE = (6041, "Excessive fee update")
    POOL_DISABLED = (6042, "Pool disabled")
    INVALID_POOL_TYPE = (6043, "Invalid pool type")
    EXCEED_MAX_WHITELIST = (6044, "Whitelist for wallet is full")
    INVALID_INDEX = (6045, "Invalid index")
    REWARD_NOT_ENDED = (6046, "Reward not ended")
    MUST_WITHDRAWN_INELIGIBLE_REWARD = (6047, "Must withdraw ineligible reward")
    INVALID_STRATEGY_PARAMETERS = (6048, "Invalid strategy parameters")
    LIQUIDITY_LOCKED = (6049, "Liquidity locked")
    INVALID_LOCK_RELEASE_SLOT = (6050, "Invalid lock release slot")

    def __init__(self, number: int, message: str) -> None:
        self.number = number
        self.message = message


class LBError(Exception):
    """Raised when a pool operation fails; carries its :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code.message)
        self.code = code

    def __repr__(self) -> str:
        return f"LBError({self.code.name})"
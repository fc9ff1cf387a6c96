"""Fixed-point price, liquidity and deposit-distribution math for DLMM pools."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "errors",
    "events",
    "liquidity",
    "price",
    "safe_math",
    "strategy",
    "u128x128_math",
    "u64x64_math",
    "utils_math",
    "weight_to_amounts",
]
"""
Core math modules для leaderboard

Математические примитивы fixed-point арифметики над большими целыми.
"""

# Scaled Arithmetic
from src.core.math.scaled_arithmetic import (
    # Constants
    DEFAULT_SCALE,
    # Parsing
    parse_amount,
    parse_price,
    # Integer primitives
    scale_decimal,
    truncating_divide,
    # Scaled operations
    scaled_divide,
    scaled_multiply,
    # Validation
    validate_scale,
)

__all__ = [
    # Scaled Arithmetic — Constants
    "DEFAULT_SCALE",
    # Scaled Arithmetic — Parsing
    "parse_amount",
    "parse_price",
    # Scaled Arithmetic — Integer primitives
    "scale_decimal",
    "truncating_divide",
    # Scaled Arithmetic — Scaled operations
    "scaled_divide",
    "scaled_multiply",
    # Scaled Arithmetic — Validation
    "validate_scale",
]

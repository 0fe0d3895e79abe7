"""Pool constants shared by the codec.

Fee values are in Uniswap fee units (hundredths of a basis point):
fee = units / 1,000,000, so 3000 = 0.3%.
"""

V3_FEE_LOWEST = 100  # 0.01% - stable pairs
V3_FEE_LOW = 500  # 0.05% - stable pairs
V3_FEE_MEDIUM = 3000  # 0.30% - most pairs
V3_FEE_HIGH = 10000  # 1.00% - exotic pairs

CONCENTRATED_FEE_TIERS = frozenset({V3_FEE_LOWEST, V3_FEE_LOW, V3_FEE_MEDIUM, V3_FEE_HIGH})

# One percentage point expressed in fee units
FEE_UNITS_PER_PERCENT = 10_000

# Amplification coefficient assumed for stable pools rebuilt from text
DEFAULT_STABLE_AMPLIFIER = 100

# Route percentages are whole numbers summing to this value
PERCENT_TOTAL = 100

__all__ = [
    "V3_FEE_LOWEST",
    "V3_FEE_LOW",
    "V3_FEE_MEDIUM",
    "V3_FEE_HIGH",
    "CONCENTRATED_FEE_TIERS",
    "FEE_UNITS_PER_PERCENT",
    "DEFAULT_STABLE_AMPLIFIER",
    "PERCENT_TOTAL",
]

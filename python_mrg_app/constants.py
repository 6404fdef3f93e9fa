"""Fixed parameters of the order-4 multiple recursive generator."""

from types import MappingProxyType

# 2^32 + 15
MODULUS = 4294967311

COEFFICIENTS = (1664543, 1013904223, 1289, 124897)

BASE_SEEDS = (11981, 4001, 1013, 1997)

# Every permutation of BASE_SEEDS, keyed 1..24.
SEED_TABLE = MappingProxyType({
    1: (11981, 4001, 1013, 1997),
    2: (11981, 4001, 1997, 1013),
    3: (11981, 1013, 4001, 1997),
    4: (11981, 1013, 1997, 4001),
    5: (11981, 1997, 4001, 1013),
    6: (11981, 1997, 1013, 4001),
    7: (4001, 11981, 1013, 1997),
    8: (4001, 11981, 1997, 1013),
    9: (4001, 1013, 11981, 1997),
    10: (4001, 1013, 1997, 11981),
    11: (4001, 1997, 11981, 1013),
    12: (4001, 1997, 1013, 11981),
    13: (1013, 11981, 4001, 1997),
    14: (1013, 11981, 1997, 4001),
    15: (1013, 4001, 11981, 1997),
    16: (1013, 4001, 1997, 11981),
    17: (1013, 1997, 11981, 4001),
    18: (1013, 1997, 4001, 11981),
    19: (1997, 11981, 4001, 1013),
    20: (1997, 11981, 1013, 4001),
    21: (1997, 4001, 11981, 1013),
    22: (1997, 4001, 1013, 11981),
    23: (1997, 1013, 11981, 4001),
    24: (1997, 1013, 4001, 11981),
})

SEED_TABLE_SIZE = len(SEED_TABLE)

DEFAULT_MEAN = 0.0
DEFAULT_STD_DEV = 1.0
DEFAULT_UNIFORM_LOW = 0.0
DEFAULT_UNIFORM_HIGH = 1.0

from enum import Enum


class Distribution(Enum):
    UNIFORM = "eUniform"
    NORMAL = "eNormal"


class NormalCacheState(Enum):
    EMPTY = "eEmpty"
    CACHED = "eCached"

import math
import numbers
import time
from collections import deque

from constants import (
    MODULUS, COEFFICIENTS, SEED_TABLE, SEED_TABLE_SIZE,
    DEFAULT_MEAN, DEFAULT_STD_DEV, DEFAULT_UNIFORM_LOW, DEFAULT_UNIFORM_HIGH,
)
from enums import NormalCacheState


class InvalidSeedKey(ValueError):
    """Raised when an explicit seed key is outside 1..SEED_TABLE_SIZE."""

    def __init__(self, seed_key):
        self.seed_key = seed_key
        super().__init__(
            f"Invalid seed_key {seed_key!r}. "
            f"Must be an integer between 1 and {SEED_TABLE_SIZE}."
        )


class Generator:
    """Order-4 multiple recursive generator with uniform and normal output.

    An instance owns a mutable 4-value recurrence window and a one-value
    Box-Muller cache. It is not safe to share between threads without
    external locking.
    """

    def __init__(self, seed_key=None,
                 mean=DEFAULT_MEAN, std_dev=DEFAULT_STD_DEV,
                 uniform_low=DEFAULT_UNIFORM_LOW, uniform_high=DEFAULT_UNIFORM_HIGH):
        if seed_key is None:
            # Wall-clock milliseconds, folded onto the seed table
            seed_key = int(time.time() * 1000) % SEED_TABLE_SIZE + 1
        elif (isinstance(seed_key, bool) or not isinstance(seed_key, numbers.Integral)
              or not 1 <= seed_key <= SEED_TABLE_SIZE):
            raise InvalidSeedKey(seed_key)

        self._seed_key = int(seed_key)
        self._state = deque(SEED_TABLE[self._seed_key], maxlen=len(COEFFICIENTS))

        self._mean = mean
        self._std_dev = std_dev
        self._uniform_low = uniform_low
        self._uniform_high = uniform_high

        self._cached_normal = None
        self._step_count = 0

    def __repr__(self):
        return (f"Generator(seed_key={self._seed_key}, mean={self._mean}, "
                f"std_dev={self._std_dev}, uniform_low={self._uniform_low}, "
                f"uniform_high={self._uniform_high})")

    @property
    def seed_key(self):
        return self._seed_key

    @property
    def mean(self):
        return self._mean

    @property
    def std_dev(self):
        return self._std_dev

    @property
    def uniform_low(self):
        return self._uniform_low

    @property
    def uniform_high(self):
        return self._uniform_high

    @property
    def state(self):
        """Copy of the current recurrence window, oldest value first."""
        return list(self._state)

    @property
    def cached_normal(self):
        return self._cached_normal

    @property
    def normal_cache_state(self):
        if self._cached_normal is None:
            return NormalCacheState.EMPTY
        return NormalCacheState.CACHED

    @property
    def step_count(self):
        """Number of recurrence steps drawn since construction."""
        return self._step_count

    def _mrg_step(self):
        """Advance the recurrence by one step and return the raw value."""
        new_seed = sum(a * x for a, x in zip(COEFFICIENTS, self._state)) % MODULUS
        # maxlen drops the oldest value
        self._state.append(new_seed)
        self._step_count += 1
        return new_seed

    def _raw_uniform(self):
        # Never exactly 0 or 1, so log() in the normal transform is safe
        return (self._mrg_step() + 1.0) / (MODULUS + 1.0)

    def random_uniform(self):
        """Uniform random number in [uniform_low, uniform_high]."""
        raw = self._raw_uniform()
        return self._uniform_low + raw * (self._uniform_high - self._uniform_low)

    def random_normal(self):
        """Normal random number with the configured mean and std_dev.

        Uses the Box-Muller transform. Every other call returns the second
        value of the previous pair and does not advance the recurrence.
        """
        if self._cached_normal is not None:
            result = self._cached_normal
            self._cached_normal = None
            return result

        u1 = self._raw_uniform()
        u2 = self._raw_uniform()

        magnitude = math.sqrt(-2.0 * math.log(u1))
        angle = 2.0 * math.pi * u2
        z1 = magnitude * math.cos(angle)
        z2 = magnitude * math.sin(angle)

        self._cached_normal = z2 * self._std_dev + self._mean
        return z1 * self._std_dev + self._mean

    def generate_uniform_sequence(self, size):
        """Generate `size` consecutive uniform values."""
        return [self.random_uniform() for _ in range(size)]

    def generate_normal_sequence(self, size):
        """Generate `size` consecutive normal values."""
        return [self.random_normal() for _ in range(size)]

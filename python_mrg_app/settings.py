from constants import (
    DEFAULT_MEAN, DEFAULT_STD_DEV, DEFAULT_UNIFORM_LOW, DEFAULT_UNIFORM_HIGH,
)
from enums import Distribution
from generator import Generator


class Settings:
    def __init__(self):
        self._seed_key = None
        self._mean = DEFAULT_MEAN
        self._std_dev = DEFAULT_STD_DEV
        self._uniform_low = DEFAULT_UNIFORM_LOW
        self._uniform_high = DEFAULT_UNIFORM_HIGH
        self._i_samples_cnt = 1000
        self._distribution = Distribution.UNIFORM

    def set_seed_key(self, i_seed_key):
        self._seed_key = i_seed_key

    def get_seed_key(self):
        return self._seed_key

    def set_mean(self, d_mean):
        self._mean = d_mean

    def get_mean(self):
        return self._mean

    def set_std_dev(self, d_std_dev):
        self._std_dev = d_std_dev

    def get_std_dev(self):
        return self._std_dev

    def set_uniform_bounds(self, d_low, d_high):
        self._uniform_low = d_low
        self._uniform_high = d_high

    def get_uniform_low(self):
        return self._uniform_low

    def get_uniform_high(self):
        return self._uniform_high

    def set_samples_cnt(self, i_num_samples):
        self._i_samples_cnt = i_num_samples

    def get_samples_cnt(self):
        return self._i_samples_cnt

    def set_distribution(self, e_distribution):
        self._distribution = e_distribution

    def get_distribution(self):
        return self._distribution

    def get_distribution_name(self):
        if self._distribution == Distribution.NORMAL:
            return "normal"
        return "uniform"

    def get_generator_params(self):
        """Distribution parameters as a plain (pickle-able) dict."""
        return {
            'mean': self._mean,
            'std_dev': self._std_dev,
            'uniform_low': self._uniform_low,
            'uniform_high': self._uniform_high,
        }

    def create_generator(self, seed_key=None):
        """Build a Generator from these settings.

        An explicit seed_key takes precedence over the stored one; if both
        are None the generator seeds itself from the clock.
        """
        if seed_key is None:
            seed_key = self._seed_key
        return Generator(seed_key, **self.get_generator_params())

    def print(self):
        print(f"Sample count: {self._i_samples_cnt}")
        print("Seed key: ", end="")
        if self._seed_key is None:
            print("auto (time-based);")
        else:
            print(f"{self._seed_key};")

        print("Distribution: ", end="")
        if self._distribution == Distribution.NORMAL:
            print(f"Normal (mean={self._mean}, std_dev={self._std_dev});")
        else:
            print(f"Uniform [{self._uniform_low}, {self._uniform_high}];")

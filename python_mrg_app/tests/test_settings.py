"""Tests for settings.py: defaults and generator construction."""

import pytest

from enums import Distribution
from generator import InvalidSeedKey
from settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.get_seed_key() is None
        assert settings.get_samples_cnt() == 1000
        assert settings.get_distribution() == Distribution.UNIFORM
        assert settings.get_distribution_name() == "uniform"
        assert settings.get_generator_params() == {
            'mean': 0.0, 'std_dev': 1.0, 'uniform_low': 0.0, 'uniform_high': 1.0,
        }

    def test_create_generator_uses_params(self):
        settings = Settings()
        settings.set_seed_key(5)
        settings.set_mean(10.0)
        settings.set_std_dev(2.0)
        settings.set_uniform_bounds(100.0, 200.0)
        gen = settings.create_generator()
        assert gen.seed_key == 5
        assert (gen.mean, gen.std_dev, gen.uniform_low, gen.uniform_high) == (10.0, 2.0, 100.0, 200.0)

    def test_explicit_key_overrides_stored(self):
        settings = Settings()
        settings.set_seed_key(5)
        assert settings.create_generator(seed_key=9).seed_key == 9

    def test_invalid_stored_key(self):
        settings = Settings()
        settings.set_seed_key(25)
        with pytest.raises(InvalidSeedKey):
            settings.create_generator()

    def test_auto_seed(self):
        gen = Settings().create_generator()
        assert 1 <= gen.seed_key <= 24

    def test_normal_name(self):
        settings = Settings()
        settings.set_distribution(Distribution.NORMAL)
        assert settings.get_distribution_name() == "normal"

    def test_print(self, capsys):
        settings = Settings()
        settings.set_seed_key(3)
        settings.set_distribution(Distribution.NORMAL)
        settings.print()
        out = capsys.readouterr().out
        assert "Seed key: 3;" in out
        assert "Normal (mean=0.0, std_dev=1.0);" in out

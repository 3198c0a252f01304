# tests/test_config.py
"""
Tests for FloatCompareConfig.
"""

import argparse
import dataclasses

import pytest

from floatcompare.config import FloatCompareConfig, add_config_arguments


class TestFloatCompareConfig:

    def test_defaults(self):
        config = FloatCompareConfig()
        assert not config.equal_only
        assert not config.skip_tests

    def test_from_args(self):
        parser = argparse.ArgumentParser()
        add_config_arguments(parser)
        args = parser.parse_args(["--equalOnly", "--skipTests"])
        config = FloatCompareConfig.from_args(args)
        assert config == FloatCompareConfig(equal_only=True, skip_tests=True)

    def test_from_args_defaults(self):
        parser = argparse.ArgumentParser()
        add_config_arguments(parser)
        assert FloatCompareConfig.from_args(parser.parse_args([])) == FloatCompareConfig()

    def test_from_args_tolerates_missing_attributes(self):
        assert FloatCompareConfig.from_args(argparse.Namespace()) == FloatCompareConfig()

    def test_immutable(self):
        config = FloatCompareConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.equal_only = True

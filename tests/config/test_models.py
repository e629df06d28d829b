"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from propdefs.config.models import LoggingConfig, PropDefsConfig, RegistryConfig


class TestRegistryConfig:
    def test_default_policy_keeps_first(self) -> None:
        assert RegistryConfig().duplicate_keys == "keep_first"

    @pytest.mark.parametrize("policy", ["keep_first", "replace", "reject"])
    def test_accepts_known_policies(self, policy: str) -> None:
        assert RegistryConfig(duplicate_keys=policy).duplicate_keys == policy

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValidationError):
            RegistryConfig(duplicate_keys="merge")


class TestLoggingConfig:
    def test_default_single_stderr_output(self) -> None:
        config = LoggingConfig()

        assert config.level == "INFO"
        assert len(config.outputs) == 1
        assert config.outputs[0].destination == "stderr"

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestPropDefsConfig:
    def test_sections_default(self) -> None:
        config = PropDefsConfig()

        assert config.logging == LoggingConfig()
        assert config.registry == RegistryConfig()

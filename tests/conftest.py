from __future__ import annotations

import random

import pytest

from codeforge.core.base_generator import BaseCodeGenerator
from codeforge.core.base_validator import BaseCodeValidator, ValidatorOptions
from codeforge.core.configurator import BaseConfiguratorBuilder, ConfiguratorBuilder
from codeforge.core.manager import CodeGeneratorManager
from codeforge.core.models import Configurator, GenerationConfiguration
from codeforge.core.registry import GeneratorRegistry, ValidatorRegistry
from codeforge.factory import default_generator_registry, default_validator_registry


class FixedCapacityBuilder(BaseConfiguratorBuilder):
    """Builds a configurator of single digit codes with a chosen max quantity."""

    def __init__(self, max_quantity: int):
        self.max_quantity = max_quantity

    def build(self, configuration: GenerationConfiguration) -> Configurator:
        return Configurator(
            charset=tuple("0123456789"[: max(self.max_quantity, 1)]),
            template=(None,),
            max_quantity=self.max_quantity,
        )


class CountingGenerator(BaseCodeGenerator):
    """Wraps another generator and counts calls."""

    def __init__(self, inner: BaseCodeGenerator):
        self.inner = inner
        self.calls = 0

    def generate(self, configurator: Configurator) -> str:
        self.calls += 1
        return self.inner.generate(configurator)


class ConstantValidator(BaseCodeValidator):
    """Always returns the same verdict and records the codes it saw."""

    def __init__(self, verdict: bool, log: list[str] | None = None, name: str = ""):
        self.verdict = verdict
        self.log = log if log is not None else []
        self.name = name
        self.seen: list[str] = []

    def validate(self, code: str, options: ValidatorOptions) -> bool:
        self.seen.append(code)
        self.log.append(self.name)
        return self.verdict


@pytest.fixture()
def generator_registry():
    return default_generator_registry(random.Random(1234))


@pytest.fixture()
def validator_registry():
    return default_validator_registry()


@pytest.fixture()
def manager(generator_registry, validator_registry):
    return CodeGeneratorManager(
        configurator_builder=ConfiguratorBuilder(),
        generator_registry=generator_registry,
        validator_registry=validator_registry,
    )


@pytest.fixture()
def call_log():
    return []


@pytest.fixture()
def constant_validators(call_log):
    registry = ValidatorRegistry()
    accept = ConstantValidator(True, call_log, "accept")
    reject = ConstantValidator(False, call_log, "reject")
    registry.register("accept", accept)
    registry.register("reject", reject)
    return registry, accept, reject


@pytest.fixture()
def counting_registry():
    counting = CountingGenerator(default_generator_registry(random.Random(99)).get("random"))
    registry = GeneratorRegistry()
    registry.register("random", counting)
    return registry, counting

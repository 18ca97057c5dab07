import random

from codeforge.core.base_generator import BaseCodeGenerator
from codeforge.core.models import Configurator


class RandomCodeGenerator(BaseCodeGenerator):
    """Fills every slot with a uniformly chosen charset character."""

    def __init__(self, rng: random.Random | None = None):
        """Initialize with an optional random source (seed it for reproducible runs)."""
        self.rng = rng or random.SystemRandom()

    def generate(self, configurator: Configurator) -> str:
        symbols = self.rng.choices(configurator.charset, k=configurator.slots)
        return configurator.render(symbols)

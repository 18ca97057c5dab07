from abc import ABC, abstractmethod

from codeforge.core.models import Configurator


class BaseCodeGenerator(ABC):
    """Abstract base class for code generation strategies.

    Calls are independent; returning an already seen code is allowed, the
    manager discards duplicates.
    """

    @abstractmethod
    def generate(self, configurator: Configurator) -> str:
        """Generate one candidate code."""
        pass

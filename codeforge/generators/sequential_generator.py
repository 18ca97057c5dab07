import threading

from codeforge.core.base_generator import BaseCodeGenerator
from codeforge.core.models import Configurator


class SequentialCodeGenerator(BaseCodeGenerator):
    """Enumerates the code space in charset order, wrapping around at the end.

    The counter is shared by every call on this instance, so consecutive
    batches continue where the previous one stopped.
    """

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self.start = start
        self._position = start
        self._lock = threading.Lock()

    def generate(self, configurator: Configurator) -> str:
        if configurator.max_quantity == 0:
            raise ValueError("Cannot generate codes from an empty code space")

        with self._lock:
            index = self._position % configurator.max_quantity
            self._position = index + 1

        return configurator.render(self._index_to_symbols(index, configurator))

    def reset(self) -> None:
        """Restart enumeration from the configured start offset."""
        with self._lock:
            self._position = self.start

    @staticmethod
    def _index_to_symbols(index: int, configurator: Configurator) -> list[str]:
        """Write index in base len(charset), most significant slot first."""
        base = len(configurator.charset)
        symbols = []
        for _ in range(configurator.slots):
            index, digit = divmod(index, base)
            symbols.append(configurator.charset[digit])
        symbols.reverse()
        return symbols

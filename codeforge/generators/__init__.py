"""Built-in code generation strategies."""

from codeforge.generators.random_generator import RandomCodeGenerator
from codeforge.generators.sequential_generator import SequentialCodeGenerator

__all__ = ["RandomCodeGenerator", "SequentialCodeGenerator"]

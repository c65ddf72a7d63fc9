"""ICSS -- a stylesheet language with variables and conditionals, compiled to CSS."""

__version__ = "0.1.0"

from icss.compiler import CompilationError, Compiler, compile_icss  # noqa: E402
from icss.config import IcssConfig  # noqa: E402
from icss.generator import Generator, GeneratorError, generate  # noqa: E402
from icss.parser import ParseError, parse_icss  # noqa: E402
from icss.transforms import Evaluation, Evaluator, evaluate  # noqa: E402
from icss.validation import Checker, CheckError, check  # noqa: E402

__all__ = [
    "__version__",
    "parse_icss",
    "ParseError",
    "Checker",
    "CheckError",
    "check",
    "Evaluator",
    "Evaluation",
    "evaluate",
    "Generator",
    "GeneratorError",
    "generate",
    "Compiler",
    "CompilationError",
    "compile_icss",
    "IcssConfig",
]

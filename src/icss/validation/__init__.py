from icss.validation.checker import Checker
from icss.validation.validator import CheckError, check, check_or_raise

__all__ = ["Checker", "CheckError", "check", "check_or_raise"]

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IcssConfig:
    indent: str = "  "
    strict: bool = True  # refuse to evaluate a stylesheet that has diagnostics

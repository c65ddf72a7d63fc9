"""Protocol shared by stylesheet rewrite steps."""

from __future__ import annotations

from typing import Protocol

from icss.model.ast import Stylesheet


class Transform(Protocol):
    """Takes a stylesheet and returns a rewritten one; the input is left untouched."""

    def apply(self, stylesheet: Stylesheet) -> Stylesheet: ...

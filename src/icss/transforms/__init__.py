from __future__ import annotations

from icss.model.ast import Stylesheet
from icss.transforms.base import Transform
from icss.transforms.evaluator import Evaluation, Evaluator, evaluate


def apply_transforms(
    stylesheet: Stylesheet, custom_transforms: list[Transform] | None = None
) -> Stylesheet:
    """Evaluate *stylesheet*, then apply any custom transforms in order."""
    transforms: list[Transform] = [Evaluator()]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        stylesheet = t.apply(stylesheet)
    return stylesheet


__all__ = ["Transform", "Evaluator", "Evaluation", "evaluate", "apply_transforms"]

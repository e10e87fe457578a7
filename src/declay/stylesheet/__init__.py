from declay.stylesheet.cascade import INLINE_ORIGIN, compute_style, explain_style
from declay.stylesheet.registry import RuleRegistry

__all__ = ["compute_style", "explain_style", "RuleRegistry", "INLINE_ORIGIN"]

"""Public API surface for concatener.processing."""
__all__ = [
    "input_resolver",
    "pattern_matcher",
]

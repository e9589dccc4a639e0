"""Generate typed resolver interfaces and scaffolds from GraphQL schemas."""

from .core.pipeline import GenerationResult, generate_code

__all__ = ["GenerationResult", "generate_code"]

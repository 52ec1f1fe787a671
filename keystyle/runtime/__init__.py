"""Style resolution runtime modules."""

from keystyle.runtime.resolver import RuntimeStyleResolver, StyleResolverBuilder

__all__ = ["RuntimeStyleResolver", "StyleResolverBuilder"]

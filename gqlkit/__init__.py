"""GraphQL building blocks: query errors, the ID scalar, cache hints and sample resolvers."""

__version__ = "0.1.0"
__all__ = ["errors", "ident", "cache", "examples"]
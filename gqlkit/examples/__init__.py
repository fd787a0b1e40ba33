"""Sample schemas and resolvers: Star Wars, a social graph, custom errors and cache hints."""

__all__ = ["starwars", "social", "customerrors", "caching"]
"""Infrastructure adapters for the hosted store and external services."""

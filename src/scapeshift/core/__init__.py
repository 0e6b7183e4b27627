"""Core helpers shared across scapeshift (logging)."""

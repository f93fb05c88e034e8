"""Infrastructure layer: security primitives, persistence and logging adapters."""

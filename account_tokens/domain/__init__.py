"""Domain layer: entities, value objects, errors and protocols (ports).

Pure business rules. No SQLAlchemy, structlog or bcrypt imports here;
infrastructure adapters satisfy the protocols structurally.
"""

"""Persistence infrastructure: ORM models, database and repositories."""

"""Opaque single-use tokens for email verification and password resets.

Layers:
    - core: configuration, constants, enums, composition root
    - domain: entities, value objects, errors, protocols (ports)
    - infrastructure: security primitives, persistence, logging (adapters)
    - application: services orchestrating issuance, verification and email changes
"""

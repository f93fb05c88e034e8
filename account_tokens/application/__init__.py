"""Application layer: services orchestrating the token flows.

Only imports from the domain layer; infrastructure is injected.
"""

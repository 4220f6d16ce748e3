"""Application layer: DTOs, repository ports, services and use cases.

Depends on the domain layer only; infrastructure implements the ports.
"""

"""Application layer: use cases, services, DTOs, and ports.

Depends on the domain only; infrastructure plugs in through the
repository protocols.
"""

"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from admissions.infrastructure or admissions.api.
"""

from admissions.application.interfaces.repositories import IUserRepository

__all__ = ["IUserRepository"]

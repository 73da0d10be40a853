"""HTTP layer: controllers, request contracts and response shaping.

Controllers validate every field before the Cavos client is touched, so a
rejected request never reaches the upstream service.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]

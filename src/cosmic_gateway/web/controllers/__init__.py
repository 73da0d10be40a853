"""HTTP controllers for the gateway endpoints.

Controllers validate input, shape contract calls and delegate to the
Cavos service. They hold no state between requests.
"""

from cosmic_gateway.web.controllers.auth import router as auth_router
from cosmic_gateway.web.controllers.cosmic_trader import router as cosmic_trader_router
from cosmic_gateway.web.controllers.wallet import router as wallet_router

__all__ = [
    "auth_router",
    "wallet_router",
    "cosmic_trader_router",
]

"""Services that shape requests for the Cavos service."""

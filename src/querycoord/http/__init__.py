"""HTTP path constants consumed by the routing layer."""

from .router import EVENT_LOG_ROUTER_PATH, HEALTHZ_ROUTER_PATH, LOG_LEVEL_ROUTER_PATH

__all__ = ["HEALTHZ_ROUTER_PATH", "LOG_LEVEL_ROUTER_PATH", "EVENT_LOG_ROUTER_PATH"]

"""Fixed HTTP paths served next to the coordinator."""

# Health state check.
HEALTHZ_ROUTER_PATH = "/healthz"

# Get and update the log level at runtime.
LOG_LEVEL_ROUTER_PATH = "/log/level"

# Event log control.
EVENT_LOG_ROUTER_PATH = "/eventlog"

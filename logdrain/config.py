import os

# Fail on router tokens that are not `key=value` (or have no unit suffix)
# instead of passing them through unchanged.
ROUTER_STRICT = os.getenv("LOGDRAIN_ROUTER_STRICT", "0").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_PREFIX = "/api"
API_VERSION_HEADER = "X-StarterKit-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# Paths excluded from request logging
SKIP_LOGGING_PATHS = {
    "/health",
    "/health/liveness",
}

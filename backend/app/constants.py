DEFAULTS = {
    # Service name reported by FastAPI
    "APP_NAME": "contentgraph-backend",
    # Prefix mounted in front of every router
    "API_PREFIX": "",
    # Identity that becomes the system owner at startup
    "SYSTEM_OWNER": "0x0000000000000000000000000000000000000001",
    # Header carrying the authenticated caller identity
    "CALLER_HEADER": "X-Caller-Identity",
    # Directory holding nodes.parquet / links.parquet to replay at startup
    "SEED_DIR": "data/seed",
    # Default page size for the events endpoint
    "EVENTS_PAGE_LIMIT": 100,
    # Root log level for the service
    "LOG_LEVEL": "INFO",
}

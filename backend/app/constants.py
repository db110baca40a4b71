DEFAULTS = {
    # Service title shown in the OpenAPI docs
    "APP_NAME": "foodweb-backend",
    # Prefix for every API route
    "API_PREFIX": "",
    # Read-only: reject every mutation
    "BASIC_MODE": False,
    # Print a snapshot of the web after every mutation
    "DEBUG_MODE": False,
    # Suppress console prompts
    "QUIET_MODE": False,
    # Organism names are truncated to this many characters
    "MAX_NAME_LENGTH": 19,
    # Interface and port the HTTP service binds to
    "HOST": "127.0.0.1",
    "PORT": 8000,
    # Root log level for the console driver
    "LOG_LEVEL": "WARNING",
}

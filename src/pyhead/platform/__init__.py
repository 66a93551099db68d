"""Platform adapters: logging and byte streams."""

"""Built-in CLI commands for vaultauth."""

"""Platform adapters: OS filesystem delegations and logging."""

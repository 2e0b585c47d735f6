"""Domain layer: publish batch model, ports and reconciliation."""

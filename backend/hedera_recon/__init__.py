"""Cross-source reconciliation of Hedera transactions (DragonGlass vs HGraph)."""

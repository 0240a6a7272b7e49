"""Command-line client for a Ledger Live host."""

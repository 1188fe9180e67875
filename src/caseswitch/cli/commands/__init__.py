"""Subcommands of the caseswitch CLI."""

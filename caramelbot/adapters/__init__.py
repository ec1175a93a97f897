"""Adapters: concrete implementations of the outbound ports and the web entry point."""

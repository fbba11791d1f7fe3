"""Adapters: external tools, templates, HTTP and terminal output."""

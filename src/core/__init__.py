"""Core: configuration, domain, interfaces and services.

The core depends on adapters only through the seams in `core.interfaces`
and the small helpers the services call directly.
"""

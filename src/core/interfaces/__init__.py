"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Services depend on these, so tests can swap in scripted prompts and fake
  tool runners.
"""

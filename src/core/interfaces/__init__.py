"""Core interfaces and abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the core depends on abstractions, the CLI wires the
  gate client and the console sink in.
"""

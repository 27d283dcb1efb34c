"""Core interfaces/abstractions.

- Defines contracts (Protocol) that concrete adapters implement.
- The core depends on abstractions, not on httpx.
"""

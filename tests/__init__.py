"""Test suite for the context event bus.

Test structure:
- unit/: Unit tests - components in isolation with mocked loggers
- integration/: Integration tests - wired bus with real handlers and
  in-memory transports
"""

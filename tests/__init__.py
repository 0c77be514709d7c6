"""
Test suite for feednav.

Covers:
- Unit tests for extraction, pagination, rendering and config
- Whole-session tests for the navigation engine and CLI
- Shared fixtures and fakes in conftest.py and helpers.py
"""

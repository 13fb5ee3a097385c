"""Test suite for module-sync.

Test organization:
- fixtures/: Manifest fixtures and helpers
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""

"""Test suite for Release Image Tags.

This package contains test modules and fixtures for verifying:
- Prefix table construction and lookup
- Tag classification
- Version validation against Cargo manifests
- The environment-driven CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""

"""
Shared testing utilities for ormfixtures.

This package contains the container configuration shared by the
server-dialect integration tests.
"""

"""
Test Fixtures and Utilities

Shared test data, utilities, and fixtures for comprehensive testing.

This module provides:
- Synthetic financial data for safe testing
- Common test utilities and helpers
- Data generation functions for various scenarios
- Mock objects for external dependencies

All test data is synthetic and does not contain real financial information.
"""

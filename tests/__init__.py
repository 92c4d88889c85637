"""
Test Suite for Capability Registry.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Scenario and wiring tests across components
    - fixtures/: Shared test data and helper loggers
"""

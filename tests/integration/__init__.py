"""
Integration Tests - End-to-End Scenario Tests.

These tests verify that contracts, implementers, dispatch and
configuration work together correctly.
"""

"""
Test Fixtures - Shared Test Data and Helpers.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample logger wiring configuration
    - loggers.py: Recording and failing stub loggers
"""

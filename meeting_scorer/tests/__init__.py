"""
Tests Package

Test suite for the meeting slot scoring engine.

Modules:
- test_algorithms: Slot scorer, heat map builder and optimizer
- test_analytics: Trends, availability rollups and the event pipeline
- test_schemas: Data contracts and loaders
- test_core: Config, errors, logging and tools

Run all tests:
    pytest meeting_scorer/tests/

Run specific test file:
    pytest meeting_scorer/tests/test_algorithms.py -v
"""

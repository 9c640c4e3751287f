"""
Unit Tests for the King Safety Engine

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_heuristics.py

    # Run with coverage
    pytest tests/ --cov=king_safety --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""

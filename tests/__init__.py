# CryptoLab Test Suite
"""
Comprehensive test suite including:
- Unit tests (core math, trace, each cipher family, RSA)
- Integration tests (key parsing, registry, console, command line)
- Security tests (invalid inputs)
- Property tests (hypothesis)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""

"""
Test suite for the Roman/Arabic calculator

Contains:
- tests/unit/          : Unit tests for the codec, domain models, and REPL
"""

"""
Core numeral conversion, domain models, and error taxonomy.

This module contains the pure calculator logic that is independent
of input/output (streams, prompts, process exit).
"""

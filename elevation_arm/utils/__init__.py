"""
Shared utilities: constants, exceptions, and small stateless helpers.
"""

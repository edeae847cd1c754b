"""
Shared infrastructure: security, middleware, bootstrap and validators.
"""

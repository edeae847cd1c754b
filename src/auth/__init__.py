"""
Authentication module for the hospital patient management system.

This module provides staff authentication including:
- Staff account registration
- JWT token login (JSON and OAuth2 form variants)
- Current-user resolution for protected routes
"""

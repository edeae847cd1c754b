"""
Hospital patient management API.
"""

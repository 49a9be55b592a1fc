"""
Core module - configuration, logging and request identity.
"""

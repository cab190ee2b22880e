"""
Utility modules for the backend application.

This package contains shared monitoring helpers.
"""

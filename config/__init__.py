"""Top-level package for Django configuration.

This package exposes configuration for the booking service. It contains
settings modules for different environments.
"""

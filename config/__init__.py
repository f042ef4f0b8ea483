"""Top-level package for Django configuration.

Contains the settings modules for the different environments.
"""

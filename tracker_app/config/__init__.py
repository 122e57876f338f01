"""
Configuration module.

Default parameters, the built-in alias table, YAML overrides and
validation of user-supplied settings.
"""

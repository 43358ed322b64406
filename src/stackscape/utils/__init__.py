"""
Support utilities for stackscape

Modules
-------
logging
    Package logger helpers.
"""

"""
Core infrastructure: settings, logging, persistence, identity, errors
and the result type.
"""

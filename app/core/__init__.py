"""
Core module - configuration, logging, auth and domain exceptions.
"""

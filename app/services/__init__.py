"""
Services Package

Record store, credentials and form validation.
"""

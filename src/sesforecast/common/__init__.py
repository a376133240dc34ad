"""src/sesforecast/common/__init__.py"""

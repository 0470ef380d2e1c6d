"""
Utility Package
===============

Logging, console printing, time formatting and file output.
"""

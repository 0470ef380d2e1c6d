"""
Input Package
=============

Command-line parsing, run configuration and external data loading.
"""

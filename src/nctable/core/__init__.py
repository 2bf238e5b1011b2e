"""
NC Table Core

Configuration, shared data types, exceptions and logging setup.
"""

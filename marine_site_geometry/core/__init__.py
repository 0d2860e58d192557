"""Core utilities and shared infrastructure.

- config: Map configuration loading and validation
- constants: Geodetic parameters and map defaults
- exceptions: Custom exception hierarchy
"""

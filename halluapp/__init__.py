"""Halluapp service marketplace backend.

The package is laid out in layers: ``domain`` holds plain entities and
errors, ``infrastructure`` the ORM models, repositories and third-party
adapters, ``application`` the use cases and ``interfaces`` the HTTP API and
the command line.
"""

"""
Application layer.

Use cases orchestrate domain objects through repository protocols and the
unit of work; they know nothing about HTTP or SQL.
"""

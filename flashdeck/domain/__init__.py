"""
Domain layer.

Framework-free business logic: entities, value objects, aggregate roots,
domain events and the stateless scheduling services.
"""

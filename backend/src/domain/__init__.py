"""
Domain Layer - Entities, value objects and rules of the booking core.

This layer has no dependency on frameworks or storage.
"""

"""
Internal DTOs

DTOs for service-to-service communication within the backend.
These are not exposed to external APIs.

Benefits:
- Decouple services from database models
- Allow services to evolve independently
- Type-safe inter-service communication
- Clear service boundaries
"""

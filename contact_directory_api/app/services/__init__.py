"""
Service layer abstraction.

The contact store keeps all directory state in process memory.  It
is created once per application and handed to the endpoints through
a FastAPI dependency.
"""

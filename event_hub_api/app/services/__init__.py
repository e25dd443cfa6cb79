"""
Service layer abstraction.

Each service encapsulates the operations for one entity kind on top
of the in-memory entity store.  API handlers only talk to services,
never to the store directly.
"""

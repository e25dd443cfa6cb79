"""
Pydantic schema definitions for API payloads.

Each entity kind (users, locations, events, participants) defines its
own models for request and response bodies.  Schemas are separated
from the stored records, which are plain dictionaries, so the API
representation can evolve independently of the store.
"""

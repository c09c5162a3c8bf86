"""
Pydantic schema definitions for API payloads.

Each domain (trainers, courses) defines a flat transport record used
for both requests and responses.  Schemas are separated from the
entities in ``models`` to decouple the API representation from
persistence: relationships are reduced to scalar identifiers here.
"""

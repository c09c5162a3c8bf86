"""
Service layer abstraction.

Each service encapsulates the business rules for a domain.  Services
receive their repositories and mappers through the constructor and
return transport records, so API handlers never see entities or SQL.
"""

"""
Service layer abstraction.

Services encapsulate business logic and talk to storage only through
the data ports defined in ``ports``.  Swapping the SQLite port for
another implementation does not require changes to the services or
the API handlers.
"""

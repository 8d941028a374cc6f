"""
db/ - Database Layer
====================
The storage backend contract, its SQLite and PostgreSQL implementations,
the shared-backend factory and the schema provisioner.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

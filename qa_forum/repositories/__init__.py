"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive rows from the storage backend they were built with and
return domain model objects.
"""

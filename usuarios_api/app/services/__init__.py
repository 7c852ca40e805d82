"""
Service layer.

Services encapsulate the SQL issued for a domain so that API handlers
stay free of persistence details.
"""

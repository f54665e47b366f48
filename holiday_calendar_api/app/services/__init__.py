"""
Service layer abstraction.

Services wrap the storage operations for a domain.  They receive the
storage gateway explicitly instead of reaching for a global handle.
"""

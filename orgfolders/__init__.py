"""
Organization-scoped folder retrieval with offset pagination.
"""

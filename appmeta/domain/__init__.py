"""
Record models, matching rules, and the in-memory store.

Nothing in this package does I/O; the HTTP layer in `appmeta.api` decodes
requests into these models and serializes access to the store.
"""

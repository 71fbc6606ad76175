"""Infrastructure layer — the in-memory shop state.

Order history lives only in process memory; nothing is persisted.
"""

"""Domain layer (business logic and domain models).

Domain modules should not depend on UI. Storage is injected by the
orchestration layer rather than imported here.
"""

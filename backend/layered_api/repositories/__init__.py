# Repositories package init
"""
Layered API — Data Access Layer
================================

Repository Inventory:
    - Repository (abstract): get_all / get_by_id / create / update / delete
    - InMemoryRepository: list-backed, generic over entity
    - SqlUserRepository / SqlOrderRepository: SQLAlchemy async backends

Backends are interchangeable from the service's point of view: same
envelopes on success, NotFoundError on a missing id.
"""

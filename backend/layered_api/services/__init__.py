# Services package init
"""
Layered API — Services Layer
=============================

What:  Business logic layer sitting between controllers and repositories.

Service Inventory:
    - EntityMapper (abstract): DTO ↔ entity conversion contract
    - UserMapper / OrderMapper: concrete mappers
    - CrudService: generic service, one instance per entity, holding one
      repository and one mapper injected at construction
"""

"""
Layered API — Application Package
==================================

What: Users and orders served through a layered REST API.

Architecture:

    ┌─────────────────────────────────────┐
    │      Routes + Controllers (HTTP)    │  ← path/body extraction, 200 / 500
    ├─────────────────────────────────────┤
    │     Services (Business Logic)       │  ← DTO ↔ entity mapping
    ├─────────────────────────────────────┤
    │   Repositories (Data Access)        │  ← in-memory or relational
    ├─────────────────────────────────────┤
    │   Schemas (Pydantic) / Models (ORM) │  ← wire shapes, tables
    └─────────────────────────────────────┘

    Every layer exchanges the same {data, success, message?} envelope.
    The composition root (container.py) picks one backend per entity at
    startup and wires the layers together.
"""

__version__ = "1.0.0"

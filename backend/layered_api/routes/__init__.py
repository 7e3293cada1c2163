# Routes package init
"""
Layered API — API Routes Package
=================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - crud.py:    router factory shared by every entity
    - users.py:   /api/users, /api/users/{id}
    - orders.py:  /api/orders, /api/orders/{id}
    - health.py:  GET /health

Routes are thin: they extract path and body parameters and hand them to the
entity's controller, which owns the status code.
"""

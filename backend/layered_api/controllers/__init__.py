# Controllers package init
"""
Layered API — Request Handling Layer
=====================================

What:  Controllers sit between the HTTP routes and the services. They invoke
       the service for a capability and turn the outcome into a status code
       plus JSON body.

Controller Inventory:
    - CrudController: generic over request/response DTOs; one instance per
      entity (users, orders), built by the composition root.
"""

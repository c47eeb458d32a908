# Routes package init
"""
CareBook Backend — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - patients.py:      /patients, /patients/{id}
    - providers.py:     /providers, /providers/{id}
    - appointments.py:  /appointments, /appointments/{id}
    - health.py:        GET /health

Design Principle:
    Routes are THIN: they pick the service from the registry, pass it the
    parsed body or path parameter and return what it gives back. Required
    fields, reference checks and error codes all live in the services.
"""

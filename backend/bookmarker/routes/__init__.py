# Routes package init
"""
Bookmarker — API Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - users.py:   GET  /user            (list users)
                  GET  /user/{id}       (get user by id field)
                  POST /user            (create user)
    - health.py:  GET  /health          (service health check)

Design Principle:
    Routes are THIN: extract request data, call the service, return the result.
"""

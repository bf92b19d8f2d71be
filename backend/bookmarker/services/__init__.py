# Services package init
"""
Bookmarker — Services Layer
===========================

What:  Data access layer sitting between routes (HTTP) and database (persistence).
Why:   Routes handle HTTP; services build queries and translate storage errors.

Service Inventory:
    - UserService: list / get-by-id / create over the `users` collection
"""

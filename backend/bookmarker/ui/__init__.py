"""
Bookmarker — UI Package
=======================

Route table registration and the shell application that renders
the component registered for a path.

    - components.py: Component base class and the Bookmarker component
    - router.py:     RouteEntry, RouteTable, register_routes()
    - shell.py:      create_ui_app() (uvicorn bookmarker.ui.shell:app)
"""

"""
Bookmarker — UI Components
==========================

What:  Renderable UI units the route table points at.
How:   A component has a `name` and a `render()` returning an HTML document.
"""

from html import escape


class Component:
    """Base class for renderable UI units."""

    name: str = "Component"
    title: str = ""

    def render(self) -> str:
        title = escape(self.title or self.name)
        return (
            "<!DOCTYPE html>\n"
            "<html lang=\"en\">\n"
            "<head>\n"
            "  <meta charset=\"utf-8\">\n"
            f"  <title>{title}</title>\n"
            "</head>\n"
            "<body>\n"
            f"  <div id=\"app\" data-component=\"{escape(self.name)}\">\n"
            f"{self.body()}\n"
            "  </div>\n"
            "</body>\n"
            "</html>\n"
        )

    def body(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name='{self.name}')>"


class Bookmarker(Component):
    """The bookmark manager's single screen."""

    name = "Bookmarker"
    title = "Bookmarker"

    def body(self) -> str:
        return (
            "    <h1>Bookmarker</h1>\n"
            "    <ul class=\"bookmarks\"></ul>"
        )

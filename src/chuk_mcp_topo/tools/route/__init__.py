from .api import register_route_tools

__all__ = ["register_route_tools"]

from .api import register_profile_tools

__all__ = ["register_profile_tools"]

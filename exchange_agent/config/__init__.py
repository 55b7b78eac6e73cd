from .settings import DEFAULT_MODEL, Settings, get_settings

__all__ = ['DEFAULT_MODEL', 'Settings', 'get_settings']

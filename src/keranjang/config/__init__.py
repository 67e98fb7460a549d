"""Configuration package for Keranjang."""
from .settings import KeranjangSettings, get_settings, clear_settings_cache

__all__ = ['KeranjangSettings', 'get_settings', 'clear_settings_cache']

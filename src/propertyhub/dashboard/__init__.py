"""
Dashboard de gestión de propiedades.
"""

from propertyhub.dashboard.properties import PropertyDashboard

__all__ = ["PropertyDashboard"]

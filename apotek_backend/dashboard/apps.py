# dashboard/apps.py

"""
DASHBOARD APP CONFIG

Admin panel overview (read-only aggregates over catalog + orders).
"""

from django.apps import AppConfig


class DashboardConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dashboard"
    verbose_name = "Admin Dashboard"

# dashboard/urls.py

"""
DASHBOARD URLS

Base path (mounted in backend/urls.py):
    /api/admin/
"""

from django.urls import path

from dashboard.views import AdminOverviewView

urlpatterns = [
    path("overview/", AdminOverviewView.as_view(), name="admin-overview"),
]

# products/urls/__init__.py
"""
Catalog URL modules (mounted in backend/urls.py):
- products.urls.public -> /api/public/products/
- products.urls.admin  -> /api/admin/
"""

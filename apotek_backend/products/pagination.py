# products/pagination.py

"""
CATALOG PAGINATION

Response envelope used by the storefront and the admin product table:

    {
        "data": [...],
        "meta": {"page": 1, "pageSize": 10, "totalCount": 42, "totalPages": 5}
    }

Query params:
- page  (1-based, default 1)
- limit (page size, default 10, capped at 100)
"""

from __future__ import annotations

import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class CatalogPagination(PageNumberPagination):
    page_size = 10
    page_query_param = "page"
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data):
        page_size = self.page.paginator.per_page
        total_count = self.page.paginator.count
        return Response(
            {
                "data": data,
                "meta": {
                    "page": self.page.number,
                    "pageSize": page_size,
                    "totalCount": total_count,
                    "totalPages": math.ceil(total_count / page_size) if page_size else 0,
                },
            }
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "data": schema,
                "meta": {
                    "type": "object",
                    "properties": {
                        "page": {"type": "integer"},
                        "pageSize": {"type": "integer"},
                        "totalCount": {"type": "integer"},
                        "totalPages": {"type": "integer"},
                    },
                },
            },
        }

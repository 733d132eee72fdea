from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

class LimitPageNumberPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = "limit"
    max_page_size = 500

    def get_paginated_response(self, data, extra: dict | None = None):
        return Response({
            "count": self.page.paginator.count,
            "limit": self.get_page_size(self.request),
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data,
            **(extra or {}),  # выбранная taxonomy и т.п.
        })

"""
Page-number pagination for the list views.

Lists come back inside the usual envelope, with the page in ``data``:
count, next, previous and results.
"""
from functools import wraps

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from rrhh_project.response_formatter import success_response


class LegajoPagination(PageNumberPagination):
    """?page=N&page_size=M, 20 per page by default and never more than 100."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return success_response(data={
            'count': self.page.paginator.count,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })


def _is_list_response(request, response):
    return request.method == 'GET' and isinstance(response, Response) and isinstance(response.data, list)


def auto_paginate(view_func):
    """
    Page the list a GET view returns. Goes last, right above the view:

        @api_view(['GET'])
        @require_page_action('hr_legajo')
        @auto_paginate
        def legajo_list(request):
            ...
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)
        if not _is_list_response(request, response):
            return response

        paginator = LegajoPagination()
        page = paginator.paginate_queryset(response.data, request)
        if page is None:
            return response
        return paginator.get_paginated_response(page)

    return wrapper

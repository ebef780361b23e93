"""
Shared base for tracker API views
"""
from django.http import JsonResponse
from django.views import View


class StoreView(View):
    """
    Class-based view bound to a LocationStore

    The store is injected per route: View.as_view(store=LocationStore())
    """
    store = None

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        if self.store is None:
            raise TypeError(f"{type(self).__name__} requires a store")


def error_response(message, status, **extra):
    return JsonResponse({'success': False, 'message': message, **extra}, status=status)

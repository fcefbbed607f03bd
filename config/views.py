from django.http import JsonResponse

from apps.reviews import errors


def health_check(request):
    """Liveness check for the hosting platform."""
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse(
        errors.not_found('NotFound', 'Not found'),
        status=404
    )


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse(errors.internal_error(), status=500)

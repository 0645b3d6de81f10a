from .toolbar import build_admin_bar


def admin_bar(request):
    user = getattr(request, 'user', None)
    if not user or not user.is_authenticated or not user.is_staff:
        return {}
    return {'admin_bar': build_admin_bar(request)}

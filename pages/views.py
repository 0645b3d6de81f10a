from django.http import Http404
from django.shortcuts import get_object_or_404, render

from .models import Page


def page_detail(request, slug):
    page = get_object_or_404(Page, slug=slug, status='published')
    request.queried_object = page
    return render(request, 'pages/page_detail.html', {'page': page})


def front_page(request):
    page = Page.objects.filter(is_front_page=True, status='published').first()
    if page is None:
        raise Http404("No front page configured")
    request.queried_object = page
    return render(request, 'pages/page_detail.html', {'page': page})

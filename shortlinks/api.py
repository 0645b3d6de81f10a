from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from pages.models import Page
from pages.shortlinks import default_shortlink
from .hooks import get_service


class PageShortlink(APIView):

    def get(self, request, page_id):
        page = get_object_or_404(Page, pk=page_id, status='published')

        shortlink, outcome = get_service().resolver.resolve_with_outcome('post', page.pk, request)
        source = 'tinyurl'
        if not shortlink:
            shortlink, source = default_shortlink(page), 'default'
        if not shortlink:
            return Response({'error': 'No shortlink available'}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            'page': page.pk,
            'shortlink': shortlink,
            'source': source,
            'outcome': outcome.value,
        })

from django.conf import settings
from django.db import models
from django.urls import reverse


class Page(models.Model):
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=64, unique=True)
    body = models.TextField(blank=True)
    status = models.CharField(max_length=16, choices=[('draft','draft'),('published','published')], default='draft')
    # The site's landing page; never gets a shortlink
    is_front_page = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.slug})"

    def get_absolute_url(self):
        if self.is_front_page:
            return reverse('page-front')
        return reverse('page-detail', kwargs={'slug': self.slug})

    @property
    def permalink(self):
        """Full permalink, including the public origin."""
        return f"{settings.BASE_URL.rstrip('/')}{self.get_absolute_url()}"

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['is_front_page'], condition=models.Q(is_front_page=True), name='single_front_page'),
        ]
        indexes = [
            models.Index(fields=['status'], name='pages_page_status_idx'),
        ]


class PageMeta(models.Model):
    """Generic metadata table shared by every entity type of the site."""
    entity_type = models.CharField(max_length=24, default='post')
    entity_id = models.BigIntegerField()
    meta_key = models.CharField(max_length=255)
    meta_value = models.TextField(blank=True)

    def __str__(self):
        return f"{self.entity_type}#{self.entity_id} {self.meta_key}"

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['entity_type', 'entity_id', 'meta_key'], name='unique_meta_per_entity'),
        ]
        indexes = [models.Index(fields=['meta_key'], name='pages_meta_key_idx')]

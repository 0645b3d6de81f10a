from django.contrib import admin
from .models import Page, PageMeta
from .meta import update_metadata, delete_metadata

IDENTITY_FIELDS = ('entity_type', 'entity_id', 'meta_key')


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'slug', 'status', 'is_front_page', 'updated_at')
    list_filter = ('status', 'is_front_page')
    search_fields = ('title', 'slug')
    prepopulated_fields = {'slug': ('title',)}


@admin.register(PageMeta)
class PageMetaAdmin(admin.ModelAdmin):
    list_display = ('id', 'entity_type', 'entity_id', 'meta_key', 'meta_value')
    list_filter = ('entity_type', 'meta_key')
    search_fields = ('meta_key', 'meta_value')

    # Go through the metadata API so hook receivers see admin edits too
    def save_model(self, request, obj, form, change):
        if change and any(f in form.changed_data for f in IDENTITY_FIELDS):
            # Moved to another entity or key: the old row goes away first
            delete_metadata(*(form.initial[f] for f in IDENTITY_FIELDS))
        saved = update_metadata(obj.entity_type, obj.entity_id, obj.meta_key, obj.meta_value)
        obj.pk = saved.pk

    def delete_model(self, request, obj):
        delete_metadata(obj.entity_type, obj.entity_id, obj.meta_key)

    def delete_queryset(self, request, queryset):
        for obj in queryset:
            self.delete_model(request, obj)

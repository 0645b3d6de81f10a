from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

class ShortlinksConfig(AppConfig):
    name = 'shortlinks'
    verbose_name = _('Shortlinks')

    def ready(self):
        from pages.toolbar import AdminBar
        from .hooks import TinyURLService, connect
        from .toolbar import MenuBuilder

        MenuBuilder.register(AdminBar)
        # Signals only hold weak references, the app config keeps it alive
        self.service = TinyURLService.from_settings()
        connect(self.service)

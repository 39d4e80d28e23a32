from django.apps import AppConfig


class MdEngineConfig(AppConfig):
    name = 'mdengine'
    verbose_name = 'Markdown'

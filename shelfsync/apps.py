from django.apps import AppConfig


class ShelfSyncConfig(AppConfig):
    name = "shelfsync"
    verbose_name = "ShelfSync"

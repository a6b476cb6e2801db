from studio.stores.django_store import DjangoStudioStore
from studio.stores.interfaces import StudioStore
from studio.stores.memory_store import InMemoryStudioStore

__all__ = ["DjangoStudioStore", "InMemoryStudioStore", "StudioStore"]

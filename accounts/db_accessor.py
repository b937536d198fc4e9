from typing import Any, Iterable, List, Optional, Type
from django.db.models import Model


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object (by pk) matching the lookup, or None."""
        return self.model.objects.filter(**lookup).order_by("pk").first()

    def in_order(self, ids: Iterable[Any], **lookup: Any) -> List[Model]:
        """Return objects with the given primary keys in the order of ``ids``.

        Ids with no matching row (or filtered out by ``lookup``) are skipped.
        """
        ids = list(ids)
        found = {obj.pk: obj for obj in self.model.objects.filter(pk__in=ids, **lookup)}
        return [found[pk] for pk in ids if pk in found]

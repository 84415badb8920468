"""
Tenant-scoped repository base.

A repository is bound to one salon at construction time; every query it
issues carries that salon filter, so tenant-scoped data cannot be read or
written without a tenant identifier.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError

from apps.core.exceptions import NotFound

logger = logging.getLogger(__name__)


class TenantScopedRepository:
    """
    CRUD primitives over a model that extends ``TenantOwnedModel``.

    Subclasses set ``model`` and may add domain queries built on ``scoped()``.
    """
    model = None
    not_found_message = 'Resource not found.'

    def __init__(self, tenant_id):
        if not tenant_id:
            raise ValueError(f"{type(self).__name__} requires a tenant id")
        self.tenant_id = tenant_id

    def scoped(self):
        """Base queryset restricted to the bound salon."""
        return self.model.objects.filter(salon_id=self.tenant_id)

    def all(self):
        return self.scoped()

    def filter(self, **lookups):
        return self.scoped().filter(**lookups)

    def find(self, pk):
        """Return the record or None."""
        if pk is None:
            return None
        try:
            return self.scoped().filter(pk=pk).first()
        except (ValueError, TypeError, DjangoValidationError):
            # Malformed identifiers (e.g. not a UUID)
            return None

    def get(self, pk):
        """Return the record or raise NotFound."""
        obj = self.find(pk)
        if obj is None:
            raise NotFound(self.not_found_message)
        return obj

    def create(self, **fields):
        fields.pop('salon', None)
        fields['salon_id'] = self.tenant_id
        return self.model.objects.create(**fields)

    def update(self, obj, **fields):
        if obj.salon_id != self.tenant_id:
            raise NotFound(self.not_found_message)
        for name, value in fields.items():
            setattr(obj, name, value)
        obj.save(update_fields=[*fields.keys(), 'updated_at'])
        return obj

    def delete(self, pk):
        deleted, _ = self.scoped().filter(pk=pk).delete()
        if not deleted:
            raise NotFound(self.not_found_message)
        logger.info("Deleted %s %s for salon %s", self.model.__name__, pk, self.tenant_id)

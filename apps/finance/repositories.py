from apps.core.repositories import TenantScopedRepository

from .models import Transaction


class TransactionRepository(TenantScopedRepository):
    model = Transaction
    not_found_message = 'Transaction not found.'

    def between(self, start, end):
        return self.scoped().filter(date__gte=start, date__lte=end)

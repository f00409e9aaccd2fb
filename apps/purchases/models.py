from django.db import models
from django.db.models import Sum
from django.core.validators import MinValueValidator
from decimal import Decimal


class Purchase(models.Model):
    """A snack purchase. Open until ``completed_at`` is set."""

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='purchases'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'purchases'
        indexes = [
            models.Index(fields=['user', 'completed_at'], name='purchase_user_completed_idx'),
            models.Index(fields=['completed_at'], name='purchase_completed_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        state = 'completed' if self.completed_at else 'open'
        return f"Purchase #{self.pk} by {self.user} ({state})"

    @property
    def is_completed(self):
        return self.completed_at is not None

    def total_amount(self):
        """Sum of all scanned amounts."""
        total = self.scans.aggregate(total=Sum('amount'))['total']
        return total or Decimal('0.00')


class Scan(models.Model):
    """One scanned item within a purchase."""

    purchase = models.ForeignKey(
        Purchase,
        on_delete=models.CASCADE,
        related_name='scans'
    )
    product = models.ForeignKey(
        'inventory.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='scans'
    )
    amount = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    scanned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'scans'
        ordering = ['scanned_at']

    def __str__(self):
        return f"{self.amount} EUR (purchase #{self.purchase_id})"


class Payment(models.Model):
    """Money paid by a user towards their balance."""

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='payments'
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    notes = models.CharField(max_length=255, blank=True)

    # Staff member who recorded the payment
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_payments'
    )

    paid_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['user', 'paid_at'], name='payment_user_paid_idx'),
        ]
        ordering = ['-paid_at']

    def __str__(self):
        return f"{self.user} paid {self.amount} EUR"

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class ShelvingActionType(models.TextChoices):
    ADDED_TO_STORAGE = 'added_to_storage', 'Added to storage'
    ADDED_TO_SHELF = 'added_to_shelf', 'Added to shelf'
    MOVED_TO_SHELF = 'moved_to_shelf', 'Moved to shelf'
    MOVED_FROM_SHELF = 'moved_from_shelf', 'Moved from shelf'
    REMOVED_FROM_STORAGE = 'removed_from_storage', 'Removed from storage'
    REMOVED_FROM_SHELF = 'removed_from_shelf', 'Removed from shelf'
    CONSUMED = 'consumed', 'Consumed'


class Product(models.Model):
    """Sellable snack identified by its barcode."""

    name = models.CharField(max_length=200)
    barcode = models.CharField(max_length=64, unique=True)
    price = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.barcode})"


class ProductBatch(models.Model):
    """A delivery of one product sharing a best-before date."""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='batches'
    )
    best_before_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_batches'
        indexes = [
            models.Index(fields=['product', 'best_before_date'], name='batch_product_bbd_idx'),
        ]
        ordering = ['best_before_date']

    def __str__(self):
        return f"{self.product.name} - best before {self.best_before_date}"


class ShelvingAction(models.Model):
    """Single stock movement for a batch. Quantities are always positive."""

    batch = models.ForeignKey(
        ProductBatch,
        on_delete=models.CASCADE,
        related_name='shelving_actions'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    action_type = models.CharField(
        max_length=32,
        choices=ShelvingActionType.choices
    )
    action_at = models.DateTimeField()

    class Meta:
        db_table = 'shelving_actions'
        indexes = [
            models.Index(fields=['batch', 'action_at'], name='shelving_batch_at_idx'),
            models.Index(fields=['action_type', 'action_at'], name='shelving_type_at_idx'),
        ]
        ordering = ['action_at']

    def __str__(self):
        return f"{self.get_action_type_display()} x{self.quantity} ({self.batch})"

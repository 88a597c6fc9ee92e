"""
Sales & Cash Flow Models

- Sale: the sale of one animal. Recording it marks the animal as sold.
- CashFlowEntry: a manually maintained income/expense ledger line.

The two ledgers are independent: recording or paying a sale never creates
a cash-flow entry.
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class Sale(models.Model):
    """
    Sale of a single animal.

    The paid flag and payment date are tracked independently of creation.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    animal = models.ForeignKey(
        'herd_management.Animal',
        on_delete=models.PROTECT,
        related_name='sales'
    )

    # Buyer
    buyer_name = models.CharField(max_length=200)
    buyer_contact = models.CharField(max_length=200, blank=True)

    # Settlement
    sale_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    sale_date = models.DateField(db_index=True)
    payment_date = models.DateField(null=True, blank=True)
    paid = models.BooleanField(default=False, db_index=True)
    notes = models.TextField(blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_sales'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sales'
        ordering = ['-sale_date', '-created_at']

    def __str__(self):
        return f"Sale of {self.animal.tag} to {self.buyer_name} ({self.sale_price})"


class CashFlowEntry(models.Model):
    """A single income or expense line in the cash-flow ledger."""

    class EntryType(models.TextChoices):
        INCOME = 'income', 'Income'
        EXPENSE = 'expense', 'Expense'

    class PaymentMethod(models.TextChoices):
        CASH = 'cash', 'Cash'
        BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'
        PIX = 'pix', 'PIX'
        CARD = 'card', 'Card'
        CHECK = 'check', 'Check'
        OTHER = 'other', 'Other'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    entry_type = models.CharField(
        max_length=10,
        choices=EntryType.choices,
        db_index=True
    )
    category = models.CharField(max_length=100)
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    date = models.DateField(db_index=True)
    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        blank=True
    )
    reference_id = models.CharField(
        max_length=100,
        blank=True,
        help_text="Identifier of the originating record (sale, invoice...)"
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cash_flow_entries'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cash_flow'
        ordering = ['-date', '-created_at']
        verbose_name = 'Cash Flow Entry'
        verbose_name_plural = 'Cash Flow Entries'
        indexes = [
            models.Index(fields=['entry_type', 'date'], name='cash_flow_type_date_idx'),
        ]

    def __str__(self):
        sign = '+' if self.entry_type == self.EntryType.INCOME else '-'
        return f"{self.date} {sign}{self.amount} {self.description}"

# Generated manually for the snackbox inventory app

from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('barcode', models.CharField(max_length=64, unique=True)),
                ('price', models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'products',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductBatch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('best_before_date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='batches', to='inventory.product')),
            ],
            options={
                'db_table': 'product_batches',
                'ordering': ['best_before_date'],
                'indexes': [models.Index(fields=['product', 'best_before_date'], name='batch_product_bbd_idx')],
            },
        ),
        migrations.CreateModel(
            name='ShelvingAction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('action_type', models.CharField(choices=[('added_to_storage', 'Added to storage'), ('added_to_shelf', 'Added to shelf'), ('moved_to_shelf', 'Moved to shelf'), ('moved_from_shelf', 'Moved from shelf'), ('removed_from_storage', 'Removed from storage'), ('removed_from_shelf', 'Removed from shelf'), ('consumed', 'Consumed')], max_length=32)),
                ('action_at', models.DateTimeField()),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='shelving_actions', to='inventory.productbatch')),
            ],
            options={
                'db_table': 'shelving_actions',
                'ordering': ['action_at'],
                'indexes': [
                    models.Index(fields=['batch', 'action_at'], name='shelving_batch_at_idx'),
                    models.Index(fields=['action_type', 'action_at'], name='shelving_type_at_idx'),
                ],
            },
        ),
    ]

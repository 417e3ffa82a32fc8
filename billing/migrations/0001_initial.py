import uuid
from decimal import Decimal

import billing.models
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('food', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Receipt',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_date', models.DateTimeField(auto_now_add=True)),
                ('modified_date', models.DateTimeField(auto_now=True)),
                ('uid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name='Uid')),
                ('file', models.FileField(max_length=255, upload_to=billing.models.receipt_upload_to, verbose_name='File')),
                ('original_filename', models.CharField(blank=True, max_length=255, verbose_name='Original filename')),
                ('content_type', models.CharField(max_length=100, verbose_name='Content type')),
                ('size', models.PositiveBigIntegerField(verbose_name='Size (bytes)')),
                ('restaurant', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='receipts', to='food.restaurant', verbose_name='Restaurant')),
                ('uploaded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Uploaded by')),
            ],
            options={
                'verbose_name': 'Receipt',
                'verbose_name_plural': 'Receipts',
                'ordering': ['-id'],
            },
        ),
        migrations.CreateModel(
            name='PaymentRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_date', models.DateTimeField(auto_now_add=True)),
                ('modified_date', models.DateTimeField(auto_now=True)),
                ('uid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name='Uid')),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))], verbose_name='Amount')),
                ('currency', models.CharField(default='PKR', max_length=8, verbose_name='Currency')),
                ('payment_method', models.CharField(choices=[('jazzcash', 'JazzCash'), ('easypaisa', 'Easypaisa'), ('bank_transfer', 'Bank Transfer')], max_length=20, verbose_name='Payment method')),
                ('bank_name', models.CharField(blank=True, max_length=255, verbose_name='Bank name')),
                ('account_number', models.CharField(blank=True, max_length=64, verbose_name='Account number')),
                ('account_holder', models.CharField(blank=True, max_length=255, verbose_name='Account holder')),
                ('transaction_ref', models.CharField(max_length=255, verbose_name='Transaction reference')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('status', models.CharField(choices=[('pending', 'PENDING'), ('under_review', 'UNDER REVIEW'), ('approved', 'APPROVED'), ('rejected', 'REJECTED')], default='pending', max_length=20, verbose_name='Status')),
                ('admin_notes', models.TextField(blank=True, verbose_name='Admin notes')),
                ('rejection_reason', models.TextField(blank=True, verbose_name='Rejection reason')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True, verbose_name='Reviewed at')),
                ('processed_at', models.DateTimeField(blank=True, null=True, verbose_name='Processed at')),
                ('processed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Processed by')),
                ('receipt', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='payment_request', to='billing.receipt', verbose_name='Receipt')),
                ('restaurant', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payment_requests', to='food.restaurant', verbose_name='Restaurant')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Reviewed by')),
                ('submitted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Submitted by')),
            ],
            options={
                'verbose_name': 'Payment Request',
                'verbose_name_plural': 'Payment Requests',
                'ordering': ['-created_date', '-id'],
                'indexes': [
                    models.Index(fields=['status', '-created_date'], name='billing_pr_status_created_idx'),
                    models.Index(fields=['restaurant', '-created_date'], name='billing_pr_rest_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BalanceTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_date', models.DateTimeField(auto_now_add=True)),
                ('modified_date', models.DateTimeField(auto_now=True)),
                ('uid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name='Uid')),
                ('type', models.CharField(choices=[('balance_add', 'BALANCE ADD')], default='balance_add', max_length=20, verbose_name='Transaction type')),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Amount')),
                ('currency', models.CharField(default='PKR', max_length=8, verbose_name='Currency')),
                ('balance_before', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Balance before')),
                ('balance_after', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Balance after')),
                ('transaction_ref', models.CharField(blank=True, max_length=255, verbose_name='Transaction reference')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Created by')),
                ('payment_request', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='balance_transaction', to='billing.paymentrequest', verbose_name='Payment request')),
                ('restaurant', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='balance_transactions', to='food.restaurant', verbose_name='Restaurant')),
            ],
            options={
                'verbose_name': 'Balance Transaction',
                'verbose_name_plural': 'Balance Transactions',
                'ordering': ['-created_date', '-id'],
            },
        ),
    ]

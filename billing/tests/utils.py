from django.core.files.uploadedfile import SimpleUploadedFile

from accounts.models import User
from billing.utilities.receipt_store import ReceiptStore
from food.models import Restaurant

PNG_BYTES = (
    b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01'
    b'\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f'
    b'\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82'
)


def make_receipt_file(name='receipt.png', content_type='image/png', size=None):
    content = PNG_BYTES if size is None else b'\0' * size
    return SimpleUploadedFile(name, content, content_type=content_type)


class BillingTestMixin:
    """Owner, admin, restaurant and receipt helpers shared by billing tests."""

    def create_owner(self, email='owner@example.com'):
        return User.objects.create_user(email=email, password='pass1234', role=User.RoleType.OWNER)

    def create_admin(self, email='admin@example.com'):
        return User.objects.create_user(email=email, password='pass1234', is_staff=True)

    def create_restaurant(self, owner, name='Karachi Grill', **kwargs):
        kwargs.setdefault('owner_email', owner.email if owner else '')
        return Restaurant.objects.create(name=name, owner=owner, **kwargs)

    def create_receipt(self, restaurant, **kwargs):
        return ReceiptStore.store(make_receipt_file(**kwargs), restaurant, uploaded_by=restaurant.owner)

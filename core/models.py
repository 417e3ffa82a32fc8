import uuid

from django.db import models
from django.utils.text import slugify
from django.utils.translation import gettext as _


class BaseModel(models.Model):
    """
        Base model for inheriting common fields
    """
    created_date = models.DateTimeField(auto_now_add=True)
    modified_date = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class SluggedModel(BaseModel):
    uid = models.UUIDField(verbose_name=_('Uid'), default=uuid.uuid4, editable=False, unique=True,
                           blank=True)
    slug = models.SlugField(max_length=250, verbose_name=_(
        'Slug'), unique=True, blank=True)
    slug_keyword_field = 'name'

    class Meta:
        abstract = True

    def get_slug(self, keyword, uid):
        base_slug = slugify(keyword)
        truncated_uuid = str(uid)[:8]  # Truncate to first 8 characters
        return f"{base_slug}-{truncated_uuid}"

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self.get_slug(
                getattr(self, self.slug_keyword_field), self.uid)
        super().save(*args, **kwargs)

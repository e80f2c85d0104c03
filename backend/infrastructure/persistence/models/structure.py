"""
Structure ORM Models.

Tree structured master data:
1. Category - categories of parts
2. Storelocation - storage locations
3. Footprint - packages/footprints
4. Manufacturer - manufacturers
5. Supplier - suppliers
"""

from django.db import models

from .base import StructuralModel


class Category(StructuralModel):
    """Category of parts."""

    class Meta(StructuralModel.Meta):
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'


class Storelocation(StructuralModel):
    """Storage location."""

    is_full = models.BooleanField(
        default=False,
        verbose_name="Storage location is full"
    )

    class Meta(StructuralModel.Meta):
        db_table = 'storelocations'
        verbose_name = 'Storage location'
        verbose_name_plural = 'Storage locations'


class Footprint(StructuralModel):
    """Footprint/package of a part."""

    class Meta(StructuralModel.Meta):
        db_table = 'footprints'
        verbose_name = 'Footprint'
        verbose_name_plural = 'Footprints'


class Manufacturer(StructuralModel):
    """Manufacturer of parts."""

    website = models.URLField(
        blank=True,
        default='',
        verbose_name="Website"
    )

    class Meta(StructuralModel.Meta):
        db_table = 'manufacturers'
        verbose_name = 'Manufacturer'
        verbose_name_plural = 'Manufacturers'


class Supplier(StructuralModel):
    """Supplier of parts."""

    website = models.URLField(
        blank=True,
        default='',
        verbose_name="Website"
    )

    class Meta(StructuralModel.Meta):
        db_table = 'suppliers'
        verbose_name = 'Supplier'
        verbose_name_plural = 'Suppliers'

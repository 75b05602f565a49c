from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Monitor 27\"", Decimal("1299.90")),
    ("Mechanical Keyboard", Decimal("399.90")),
    ("Gaming Mouse", Decimal("249.90")),
    ("Notebook 14\"", Decimal("3999.00")),
    ("Headset", Decimal("299.90")),
    ("Office Desk", Decimal("899.00")),
    ("Ergonomic Chair", Decimal("1499.00")),
    ("Bookshelf", Decimal("699.00")),
    ("A4 Paper", Decimal("29.90")),
    ("Blue Pen", Decimal("4.90")),
    ("Notebook Stand", Decimal("149.90")),
    ("LED Lamp", Decimal("59.90")),
]


class Command(BaseCommand):
    help = "Seed the products table with development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product before seeding.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        if options["clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} products.")

        created = 0
        for name, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "availability": random.random() > 0.2,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={created}")
        )

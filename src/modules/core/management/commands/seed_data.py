from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Monitor Curvo de 49 Pulgadas FHD", Decimal("500.00"), True),
    ("Teclado Mecánico RGB", Decimal("89.90"), True),
    ("Mouse Inalámbrico", Decimal("25.50"), True),
    ("Audífonos Gamer", Decimal("120.00"), False),
    ("Laptop 14 Pulgadas", Decimal("999.00"), True),
    ("Adaptador USB-C", Decimal("15.00"), True),
    ("Silla Ergonómica", Decimal("349.00"), False),
    ("Webcam Full HD", Decimal("65.00"), True),
]


class Command(BaseCommand):
    help = "Seed database with a demo product catalog."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, price, availability in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(CATALOG) - created} already present"
            )
        )

from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

CATALOG = [
    ("Scratcher Tower", "Catnip Co.", 45000, "https://http.cat/200"),
    ("Feather Wand", "Catnip Co.", 8000, "https://http.cat/201"),
    ("Laser Pointer", "Brightpaw", 12000, "https://http.cat/202"),
    ("Tunnel Maze", "Brightpaw", 29000, "https://http.cat/204"),
    ("Mouse Plush", "Whisker Works", 5000, "https://http.cat/301"),
    ("Ball Track", "Whisker Works", 15000, "https://http.cat/302"),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Insert the sample products even if the catalog is not empty.",
        )

    def handle(self, *args, **options):
        service = ProductService(repository=ProductDjangoRepository())

        if service.list_products() and not options["force"]:
            self.stdout.write(
                self.style.WARNING("Catalog is not empty, skipping (use --force).")
            )
            return

        self.stdout.write("Creating products...")
        for name, maker, price, image in CATALOG:
            service.create_product(
                CreateProductDTO(name=name, maker=maker, price=price, image=image)
            )
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(CATALOG)}")
        )

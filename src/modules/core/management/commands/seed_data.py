"""Populate a development database with a small registry.

Records go through the services, so every seeded customer and product
passes the same validation as an API request.  Re-running the command is
safe: existing natural keys are skipped.
"""

from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.products.dtos import CreateProductDTO
from modules.products.models import Product, ProductStatus
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

# (name, cpf, email, active)
CUSTOMERS = [
    ("Ana Souza", "390.533.447-05", "ana@example.com", True),
    ("Bruno Lima", "529.982.247-25", "bruno@example.com", True),
    ("Carla Mendes", "111.444.777-35", "carla@example.com", True),
    ("Daniel Costa", "123.456.789-09", "", False),
    ("Fernanda Rocha", "987.654.321-00", "fernanda@example.com", True),
    ("Helena Ferreira", "111.222.333-96", "helena@example.com", False),
]

# (code, name, price, status, active)
PRODUCTS = [
    ("ELET-001", 'Monitor 27"', Decimal("1299.90"), ProductStatus.ACTIVE, True),
    ("ELET-002", "Teclado Mecânico", Decimal("399.90"), ProductStatus.PROMOTIONAL, True),
    ("ELET-003", 'Notebook 14"', Decimal("3999.00"), ProductStatus.DISCONTINUED, True),
    ("MOV-001", "Cadeira Ergonômica", Decimal("1499.00"), ProductStatus.INACTIVE, True),
    ("OFF-001", "Papel A4", Decimal("29.90"), ProductStatus.ACTIVE, False),
    ("OFF-002", "Brinde Evento", Decimal("0.00"), ProductStatus.PROMOTIONAL, True),
]


class Command(BaseCommand):
    help = "Seed the registry with development users, customers and products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Permanently delete every customer and product first.",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            deleted_customers, _ = Customer.objects.all().delete()
            deleted_products, _ = Product.objects.all().delete()
            self.stdout.write(
                f"Cleared customers={deleted_customers}, products={deleted_products}"
            )

        users = self._seed_users()
        customers = self._seed_customers(
            CustomerService(repository=CustomerDjangoRepository())
        )
        products = self._seed_products(
            ProductService(repository=ProductDjangoRepository()), random.Random(42)
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: users={users}, customers={customers}, products={products}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_customers(self, service: CustomerService) -> int:
        created = 0
        for name, cpf, email, active in CUSTOMERS:
            dto = CreateCustomerDTO(cpf=cpf, name=name, email=email or None)
            if service.list_customers({"cpf": dto.cpf}).exists():
                continue
            customer = service.create_customer(dto)
            if not active:
                service.deactivate_customer(str(customer.id))
            created += 1
        return created

    def _seed_products(self, service: ProductService, rng: random.Random) -> int:
        created = 0
        for code, name, price, status, active in PRODUCTS:
            if service.list_products({"code": code}).exists():
                continue
            product = service.create_product(
                CreateProductDTO(
                    code=code,
                    name=name,
                    price=price,
                    status=status.value,
                    stock=rng.randint(0, 200),
                )
            )
            if not active:
                service.deactivate_product(str(product.id))
            created += 1
        return created

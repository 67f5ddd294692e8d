import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_active", models.BooleanField(default=True)),
                ("cpf", models.CharField(max_length=11, unique=True)),
                ("name", models.CharField(max_length=255)),
                (
                    "email",
                    models.EmailField(blank=True, default="", max_length=254),
                ),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("address", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "customers",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "created_at"],
                        name="customers_active_created_idx",
                    )
                ],
            },
        ),
    ]

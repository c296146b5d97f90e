import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Quote",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("shop_id", models.CharField(db_index=True, max_length=255)),
                ("product_id", models.CharField(max_length=255)),
                ("variant_id", models.CharField(max_length=255)),
                ("title", models.CharField(max_length=255)),
                ("name", models.CharField(blank=True, default="", max_length=200)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                ("image", models.URLField(blank=True, default="", max_length=500)),
                ("metadata", models.TextField(blank=True, default="")),
                ("message", models.TextField(blank=True, default="")),
                ("status", models.CharField(default="pending", max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "Quote",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ShopSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("shop_id", models.CharField(max_length=255, unique=True)),
                ("admin_email", models.EmailField(max_length=254)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "settings",
                "verbose_name_plural": "settings",
                "db_table": "Settings",
            },
        ),
    ]

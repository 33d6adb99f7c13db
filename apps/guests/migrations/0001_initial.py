import django.db.models.deletion
from django.db import migrations, models

import shared.infrastructure.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("rooms", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Guest",
            fields=[
                ("id", shared.infrastructure.fields.IdentifierField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("phone", models.CharField(blank=True, max_length=32)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("document_id", models.CharField(blank=True, max_length=64)),
                ("nationality", models.CharField(blank=True, max_length=64)),
                (
                    "age_group",
                    models.CharField(
                        blank=True,
                        choices=[("18-25", "18-25"), ("26-35", "26-35"), ("36-50", "36-50"), ("50+", "50+")],
                        max_length=8,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="guests",
                        to="rooms.company",
                    ),
                ),
            ],
            options={
                "verbose_name": "Guest",
                "verbose_name_plural": "Guests",
                "ordering": ["name"],
            },
        ),
    ]

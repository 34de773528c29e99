import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("projects", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DigestEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("tasks.create", "Task created"), ("tasks.complete", "Task completed"), ("tasks.uncomplete", "Task reopened"), ("tasks.update", "Task updated"), ("tasks.remove", "Task removed"), ("tasks.deleteForever", "Task deleted forever")], max_length=32)),
                ("when", models.DateField(db_index=True)),
                ("task_name", models.CharField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="digest_events", to=settings.AUTH_USER_MODEL)),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="digest_events", to="projects.project")),
            ],
            options={
                "indexes": [models.Index(fields=["project", "when", "type"], name="digest_project_day_type_idx")],
            },
        ),
    ]

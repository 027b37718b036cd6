# Generated manually for clients app

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('offices', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Client',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('display_name', models.CharField(max_length=100)),
                ('external_id', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('is_deleted', models.BooleanField(default=False)),
                ('office', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='clients', to='offices.office')),
            ],
            options={
                'db_table': 'clients',
                'ordering': ['display_name'],
            },
        ),
    ]

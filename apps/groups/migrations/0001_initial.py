# Generated manually for groups app

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('offices', '0001_initial'),
        ('clients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='GroupLevel',
            fields=[
                ('id', models.PositiveSmallIntegerField(primary_key=True, serialize=False)),
                ('level_name', models.CharField(max_length=100, unique=True)),
                ('super_parent', models.BooleanField(default=False)),
                ('recursable', models.BooleanField(default=False)),
                ('can_have_clients', models.BooleanField(default=False)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='child_levels', to='groups.grouplevel')),
            ],
            options={
                'db_table': 'group_levels',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=100, null=True)),
                ('external_id', models.CharField(blank=True, max_length=100, null=True)),
                ('status', models.PositiveSmallIntegerField(choices=[(0, 'Invalid'), (100, 'Pending'), (300, 'Active'), (600, 'Closed')], default=100)),
                ('activation_date', models.DateField(blank=True, null=True)),
                ('hierarchy', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('client_members', models.ManyToManyField(blank=True, db_table='group_clients', related_name='groups', to='clients.client')),
                ('level', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='groups', to='groups.grouplevel')),
                ('office', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='groups', to='offices.office')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='children', to='groups.group')),
                ('staff', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='groups', to='offices.staff')),
            ],
            options={
                'db_table': 'groups',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['hierarchy'], name='groups_hierarchy_idx')],
                'constraints': [
                    models.UniqueConstraint(fields=('name', 'level'), name='unique_group_name_per_level'),
                    models.UniqueConstraint(fields=('external_id', 'level'), name='unique_group_external_id_per_level'),
                ],
            },
        ),
    ]

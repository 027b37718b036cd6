# Seeds the fixed grouping hierarchy: Center -> Group (groups may nest).

from django.db import migrations


def seed_group_levels(apps, schema_editor):
    GroupLevel = apps.get_model('groups', 'GroupLevel')
    center, _ = GroupLevel.objects.update_or_create(
        id=1,
        defaults={
            'level_name': 'Center',
            'super_parent': True,
            'recursable': False,
            'can_have_clients': False,
        },
    )
    GroupLevel.objects.update_or_create(
        id=2,
        defaults={
            'level_name': 'Group',
            'parent': center,
            'super_parent': False,
            'recursable': True,
            'can_have_clients': True,
        },
    )


def remove_group_levels(apps, schema_editor):
    GroupLevel = apps.get_model('groups', 'GroupLevel')
    GroupLevel.objects.filter(id=2).delete()
    GroupLevel.objects.filter(id=1).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('groups', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_group_levels, remove_group_levels),
    ]

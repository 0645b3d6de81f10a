from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Page',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=64, unique=True)),
                ('body', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('draft', 'draft'), ('published', 'published')], default='draft', max_length=16)),
                ('is_front_page', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'indexes': [models.Index(fields=['status'], name='pages_page_status_idx')],
                'constraints': [models.UniqueConstraint(condition=models.Q(('is_front_page', True)), fields=('is_front_page',), name='single_front_page')],
            },
        ),
        migrations.CreateModel(
            name='PageMeta',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('entity_type', models.CharField(default='post', max_length=24)),
                ('entity_id', models.BigIntegerField()),
                ('meta_key', models.CharField(max_length=255)),
                ('meta_value', models.TextField(blank=True)),
            ],
            options={
                'indexes': [models.Index(fields=['meta_key'], name='pages_meta_key_idx')],
                'constraints': [models.UniqueConstraint(fields=('entity_type', 'entity_id', 'meta_key'), name='unique_meta_per_entity')],
            },
        ),
    ]

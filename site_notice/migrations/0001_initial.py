from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='SiteNoticeSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('message', models.TextField(blank=True, help_text='Short text recommended.')),
                ('message_format', models.CharField(choices=[('markdown', 'Markdown'), ('plain_text', 'Plain text'), ('full_html', 'Full HTML')], default='markdown', max_length=20)),
                ('link_url', models.URLField(blank=True, max_length=500, verbose_name='Link URL (optional)')),
                ('start', models.CharField(blank=True, help_text='ISO-8601 start datetime. Shown immediately if empty.', max_length=64)),
                ('end', models.CharField(blank=True, help_text='ISO-8601 end datetime. No time limit if empty.', max_length=64)),
                ('background', models.CharField(choices=[('is-default', 'Default'), ('is-info', 'Info'), ('is-success', 'Success'), ('is-warning', 'Warning'), ('is-danger', 'Danger')], default='is-default', max_length=20, verbose_name='Background color')),
                ('closable', models.BooleanField(default=False, verbose_name='Show close button')),
                ('storage_key_salt', models.CharField(blank=True, help_text='Change to show the notice again to visitors who closed it.', max_length=100)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Site notice settings',
                'verbose_name_plural': 'Site notice settings',
            },
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AnagramPuzzle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the row was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the row was last updated.')),
                ('storage_key', models.CharField(db_index=True, help_text='Collection identifier.', max_length=64)),
                ('puzzle_id', models.CharField(help_text='Opaque puzzle identifier.', max_length=64)),
                ('position', models.PositiveIntegerField(default=0, help_text='Order within the collection.')),
                ('name', models.CharField(blank=True, default='', help_text='Display name.', max_length=255)),
                ('length', models.PositiveSmallIntegerField(default=5, help_text='Number of slots.')),
                ('known_letters', models.JSONField(blank=True, default=dict, help_text='Slot index -> locked letter.')),
                ('pool', models.CharField(blank=True, default='', help_text='Uppercase available letters.', max_length=32)),
                ('created_ms', models.BigIntegerField(default=0, help_text='Record creation time in epoch milliseconds.')),
            ],
            options={
                'verbose_name': 'Anagram Puzzle',
                'verbose_name_plural': 'Anagram Puzzles',
                'ordering': ['storage_key', 'position'],
                'unique_together': {('storage_key', 'puzzle_id')},
            },
        ),
    ]

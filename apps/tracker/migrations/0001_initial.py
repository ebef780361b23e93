# Initial schema for the locations table

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LocationReport',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('imei', models.CharField(db_index=True, help_text='Device IMEI (free-form)', max_length=64)),
                ('longitude', models.FloatField()),
                ('height', models.FloatField(help_text='Altitude, unit defined by the device')),
                ('latitude', models.FloatField()),
                ('timestamp', models.DateTimeField(db_index=True, help_text='Time the report was received')),
            ],
            options={
                'db_table': 'locations',
                'ordering': ['-timestamp'],
            },
        ),
        migrations.AddIndex(
            model_name='locationreport',
            index=models.Index(fields=['imei', '-timestamp'], name='locations_imei_ts_idx'),
        ),
    ]

from django.db import migrations

from shared.infrastructure.ddl import identity_column

# FIRST_NAME is capped at five characters. SQLite ignores VARCHAR lengths,
# so the CHECK constraint enforces the cap on every engine.
CREATE_BOOKINGS = """
create table BOOKINGS (
    {id_column},
    FIRST_NAME varchar(5) not null,
    constraint bookings_first_name_length check (length(FIRST_NAME) <= 5)
)
"""

DROP_BOOKINGS = "drop table BOOKINGS"


def create_bookings_table(apps, schema_editor):
    id_column = identity_column(schema_editor.connection.vendor, "ID")
    schema_editor.execute(CREATE_BOOKINGS.format(id_column=id_column))


def drop_bookings_table(apps, schema_editor):
    schema_editor.execute(DROP_BOOKINGS)


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.RunPython(create_bookings_table, drop_bookings_table),
    ]

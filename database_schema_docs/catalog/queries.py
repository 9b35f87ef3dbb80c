"""SQL issued against the PostgreSQL catalog views."""

LIST_TABLES = """
    SELECT
      table_name,
      obj_description(('"' || table_schema || '"."' || table_name || '"')::regclass) AS table_description
    FROM information_schema.tables
    WHERE table_schema = %(schema)s
    {table_type_filter}
    ORDER BY table_name;
"""

BASE_TABLES_ONLY = "AND table_type = 'BASE TABLE'"

DESCRIBE_COLUMNS = """
    SELECT
      c.column_name,
      c.data_type,
      c.is_nullable = 'YES' AS nullable,
      c.character_maximum_length AS max_length,
      c.column_default AS default_expression,
      EXISTS (
        SELECT 1
        FROM information_schema.table_constraints tc
        JOIN information_schema.key_column_usage kcu
          ON tc.constraint_name = kcu.constraint_name
        WHERE tc.table_schema = %(schema)s
          AND tc.table_name = %(table)s
          AND tc.constraint_type = 'PRIMARY KEY'
          AND kcu.column_name = c.column_name
      ) AS is_primary_key,
      fk.referenced_table AS relation
    FROM information_schema.columns c
    LEFT JOIN ({relation_subquery}) fk
      ON c.column_name = fk.column_name
    WHERE c.table_schema = %(schema)s AND c.table_name = %(table)s
    ORDER BY c.ordinal_position;
"""

# Matches key usage to constraint usage by constraint name only, over every
# key constraint of the table, so primary and unique keys take part as well.
BEST_EFFORT_RELATIONS = """
      SELECT
        kcu.column_name,
        ccu.table_name AS referenced_table
      FROM information_schema.key_column_usage kcu
      JOIN information_schema.constraint_column_usage ccu
        ON kcu.constraint_name = ccu.constraint_name
      WHERE kcu.table_schema = %(schema)s AND kcu.table_name = %(table)s
"""

CONSTRAINT_RELATIONS = """
      SELECT
        kcu.column_name,
        ccu.table_name AS referenced_table
      FROM information_schema.table_constraints tc
      JOIN information_schema.key_column_usage kcu
        ON tc.constraint_schema = kcu.constraint_schema
       AND tc.constraint_name = kcu.constraint_name
      JOIN information_schema.constraint_column_usage ccu
        ON tc.constraint_schema = ccu.constraint_schema
       AND tc.constraint_name = ccu.constraint_name
      WHERE tc.constraint_type = 'FOREIGN KEY'
        AND tc.table_schema = %(schema)s
        AND tc.table_name = %(table)s
"""

RELATION_SUBQUERIES = {
    "best_effort": BEST_EFFORT_RELATIONS,
    "constraint": CONSTRAINT_RELATIONS,
}


def list_tables_query(include_views: bool = True) -> str:
    return LIST_TABLES.format(
        table_type_filter="" if include_views else BASE_TABLES_ONLY
    )


def describe_columns_query(relation_lookup: str = "best_effort") -> str:
    try:
        subquery = RELATION_SUBQUERIES[relation_lookup]
    except KeyError:
        raise ValueError(
            f"Unknown relation lookup '{relation_lookup}', "
            f"expected one of: {', '.join(RELATION_SUBQUERIES)}"
        ) from None
    return DESCRIBE_COLUMNS.format(relation_subquery=subquery)

from google.cloud import bigquery

from sqltemplate import QueryBuilder

client = bigquery.Client()
qb = QueryBuilder(client=client)

select_sql = qb.build_query(
    "SELECT ?# FROM `ga4.events` WHERE platform = ? AND event_count > ?d{ AND country IN (?a)}",
    [["event_name", "platform"], "IOS", 10, ["NO", "SE"]],
)
print(select_sql)

unfiltered_sql = qb.build_query(
    "SELECT ?# FROM `ga4.events` WHERE platform = ? AND event_count > ?d{ AND country IN (?a)}",
    [["event_name", "platform"], "IOS", 10, qb.skip()],
)
print(unfiltered_sql)

update_sql = qb.build_query(
    "UPDATE `ga4.users` SET ?a WHERE user_id = ?d",
    [{"tier": "gold", "score": 7.5, "churned": False}, 42],
)
print(update_sql)

rows = client.query(select_sql).result()
print(rows.total_rows)

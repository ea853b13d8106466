import os

import boto3


def get_table(table_name: str | None = None):
    """TABLE_NAME 環境変数（または引数）から DynamoDB テーブルを取得する"""
    dynamodb = boto3.resource("dynamodb")
    return dynamodb.Table(table_name or os.getenv("TABLE_NAME"))


def query_all(table, **kwargs) -> list[dict]:
    """LastEvaluatedKey を辿ってクエリ結果をすべて取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def count_all(table, **kwargs) -> int:
    """Select=COUNT のクエリを全ページ分合計する"""
    total = 0
    kwargs["Select"] = "COUNT"
    while True:
        response = table.query(**kwargs)
        total += response.get("Count", 0)
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return total
        kwargs["ExclusiveStartKey"] = last_key


def is_conditional_check_failure(error) -> bool:
    return error.response["Error"]["Code"] == "ConditionalCheckFailedException"

import os

# ハンドラーはモジュール読み込み時に boto3 のリソースを生成するため、
# テスト収集より前にリージョンとテーブル名を設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-hotel-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hotel-test")

import copy

import pytest

from database_wizard.schema_model import SchemaDescription

SHOP_SCHEMA = {
    "databaseName": "Shop",
    "tables": [
        {
            "tableName": "Users",
            "primaryKey": "Id",
            "columns": [
                {"columnName": "Id", "dataType": "INT", "isNullable": False},
                {"columnName": "Email", "dataType": "NVARCHAR", "maxLength": 255},
                {"columnName": "Bio", "dataType": "NVARCHAR", "isNullable": True, "maxLength": -1},
            ],
        },
        {
            "tableName": "Orders",
            "primaryKey": "Id",
            "columns": [
                {"columnName": "Id", "dataType": "INT"},
                {"columnName": "UserId", "dataType": "INT"},
                {"columnName": "Total", "dataType": "DECIMAL(10,2)"},
                {"columnName": "PlacedAt", "dataType": "datetime2", "isNullable": True},
            ],
        },
    ],
    "relations": [
        {"parentTable": "Users", "parentColumn": "Id", "childTable": "Orders", "childColumn": "UserId"},
    ],
}


@pytest.fixture
def shop_payload():
    return copy.deepcopy(SHOP_SCHEMA)


@pytest.fixture
def shop_schema(shop_payload):
    return SchemaDescription.model_validate(shop_payload)


@pytest.fixture
def minimal_payload():
    return {
        "databaseName": "Shop",
        "tables": [
            {
                "tableName": "Users",
                "primaryKey": "Id",
                "columns": [{"columnName": "Id", "dataType": "INT", "isNullable": False}],
            }
        ],
        "relations": [],
    }

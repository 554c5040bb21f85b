"""
JSON схемы ответов API и помощник для их проверки через jsonschema.
"""

from jsonschema import ValidationError, validate

# ----- BRANDS / CATEGORIES -----
# Элемент списка GET /brands и GET /categories содержит ровно _id и name
LIST_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "_id": {"type": "string"},
        "name": {"type": "string"},
    },
    "required": ["_id", "name"],
    "additionalProperties": False,
}

LIST_SCHEMA = {
    "type": "array",
    "items": LIST_ITEM_SCHEMA,
}

BRAND_SCHEMA = {
    "type": "object",
    "properties": {
        "_id": {"type": "string"},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "createdAt": {"type": "string"},
        "updatedAt": {"type": "string"},
    },
    "required": ["_id", "name"],
}

CATEGORY_SCHEMA = {
    "type": "object",
    "properties": {
        "_id": {"type": "string"},
        "name": {"type": "string"},
    },
    "required": ["_id", "name"],
}

# ----- ОШИБКИ (404, 422) -----
ERROR_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {"type": "string"},
    },
    "required": ["error"],
}

# ----- ADMIN -----
LOGIN_SCHEMA = {
    "type": "object",
    "properties": {
        "token": {"type": "string", "minLength": 1},
    },
    "required": ["token"],
}

# ----- UPLOAD -----
UPLOAD_RESULT_SCHEMA = {
    "type": "object",
    "properties": {
        "filename": {"type": "string"},
    },
    "required": ["filename"],
}

UPLOAD_RESULT_LIST_SCHEMA = {
    "type": "array",
    "items": UPLOAD_RESULT_SCHEMA,
}


def assert_schema(data, schema):
    """Проверяет data по схеме; несоответствие превращается в AssertionError."""
    try:
        validate(instance=data, schema=schema)
    except ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise AssertionError(f"Ответ не соответствует схеме в {path}: {e.message}") from e

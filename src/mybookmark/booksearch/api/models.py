"""Base model for catalog payloads."""

from pydantic import BaseModel, model_validator


class CatalogModel(BaseModel):
    """Catalog record that reads an explicit null as the field's default.

    Catalogs send `null` for empty lists, counts and nested objects on some
    records. Fields with a non-null default fall back to it, and null entries
    inside lists are dropped, so one sparse record never fails a whole response.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        if not isinstance(data, dict):
            return data

        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            if name not in cleaned or (field.default is None and field.default_factory is None):
                continue
            value = cleaned[name]
            if value is None:
                del cleaned[name]
            elif isinstance(value, list):
                cleaned[name] = [item for item in value if item is not None]
        return cleaned

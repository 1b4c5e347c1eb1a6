from .form_validator import Message, SchemaFormValidator

__all__ = ["Message", "SchemaFormValidator"]

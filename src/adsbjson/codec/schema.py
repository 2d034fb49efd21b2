"""Schema introspection for wire models.

This module analyses a WireModel and extracts the information the codec
needs beyond what Pydantic validates: the closed set of wire names, which
of them are required, and the JSON kind each field expects (used to word
type-mismatch diagnostics).
"""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type, Union, get_args, get_origin

from annotated_types import Ge, Le
from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..models.aircraft import Altitude


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Attribute name on the model
        wire_name: Key used in the JSON object
        required: Whether the key must be present
        python_type: Element type after unwrapping Optional/list
        min_value: Minimum value constraint (for integers)
        max_value: Maximum value constraint (for integers)
        enum_type: Enum class if field (or its elements) is an enum
        is_list: Whether field is a JSON array
    """

    name: str
    wire_name: str
    required: bool
    python_type: Type[Any]
    min_value: Optional[int]
    max_value: Optional[int]
    enum_type: Optional[Type[enum.Enum]]
    is_list: bool

    @property
    def element_kind(self) -> str:
        """JSON kind of a single value (or array element) of this field."""
        if self.python_type is Altitude:
            return "integer or 'ground'"
        if self.enum_type is not None:
            return "string"
        if self.python_type is bool:
            return "boolean"
        if self.python_type is int:
            if self.min_value is not None and self.max_value is not None:
                return f"integer in [{self.min_value}, {self.max_value}]"
            return "integer"
        if self.python_type is float:
            return "number"
        if self.python_type is str:
            return "string"
        raise SchemaError(f"Field {self.name}: unsupported type {self.python_type}")

    @property
    def expected_kind(self) -> str:
        """JSON kind of the whole field value."""
        if self.is_list:
            return f"array of {self.element_kind}"
        return self.element_kind


class MessageSchema:
    """Schema information for an entire message.

    Example:
        >>> schema = MessageSchema.from_model(AircraftMessage)
        >>> schema.by_wire_name["alt_baro"].name
        'altitude'
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()
        self.by_wire_name: Dict[str, FieldSchema] = {f.wire_name: f for f in self.fields}
        self.wire_names = frozenset(self.by_wire_name)
        self.required_wire_names: Tuple[str, ...] = tuple(
            f.wire_name for f in self.fields if f.required
        )

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        """Create (or fetch the cached) schema for a model class."""
        return _cached_schema(model_class)

    def _introspect(self) -> None:
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_field_schema(field_name, field_info))

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        metadata = list(field_info.metadata)

        # Optional[T] -> T
        if get_origin(annotation) is Union:
            non_none_args = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(non_none_args) != 1:
                raise SchemaError(f"Field {name}: complex Union types not supported")
            annotation = non_none_args[0]

        # list[T] -> T
        is_list = False
        if get_origin(annotation) is list:
            is_list = True
            (annotation,) = get_args(annotation)

        # Annotated[T, ...] left over from Optional/list unwrapping
        annotation, extra = _strip_annotated(annotation)
        metadata.extend(extra)

        min_value = None
        max_value = None
        for constraint in metadata:
            if isinstance(constraint, Ge):
                min_value = constraint.ge
            elif isinstance(constraint, Le):
                max_value = constraint.le
            elif isinstance(constraint, FieldInfo):
                for inner in constraint.metadata:
                    if isinstance(inner, Ge):
                        min_value = inner.ge
                    elif isinstance(inner, Le):
                        max_value = inner.le

        enum_type = None
        if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
            enum_type = annotation

        return FieldSchema(
            name=name,
            wire_name=field_info.alias or name,
            required=field_info.is_required(),
            python_type=annotation,
            min_value=min_value,
            max_value=max_value,
            enum_type=enum_type,
            is_list=is_list,
        )


def _strip_annotated(annotation: Any) -> Tuple[Any, List[Any]]:
    metadata = getattr(annotation, "__metadata__", None)
    if metadata is None:
        return annotation, []
    return annotation.__origin__, list(metadata)


@functools.lru_cache(maxsize=None)
def _cached_schema(model_class: Type[BaseModel]) -> MessageSchema:
    return MessageSchema(model_class)

"""Wire field table CLI command."""

from __future__ import annotations

from ..codec.schema import MessageSchema
from ..models.aircraft import AircraftMessage


def print_fields() -> None:
    """Print every wire field of AircraftMessage with its attribute and type."""
    schema = MessageSchema.from_model(AircraftMessage)

    print(f"{'=' * 19} {AircraftMessage.__name__} {'=' * 19}")
    print(f"{len(schema.fields)} fields, {len(schema.required_wire_names)} required.")
    print()

    for i, field_schema in enumerate(schema.fields, 1):
        wire = field_schema.wire_name
        if field_schema.name != wire:
            wire = f"{wire} -> {field_schema.name}"
        marker = "required" if field_schema.required else "optional"
        field_desc = f"{i}. {wire}"

        info = f"{field_schema.expected_kind} ({marker})"
        if field_schema.enum_type is not None:
            tokens = ", ".join(member.value for member in field_schema.enum_type)
            info = f"{info} [{tokens}]"

        dots = "." * max(1, 40 - len(field_desc))
        print(f"        {field_desc}{dots}{info}")

"""Labeled column sets for join queries.

Every entity's columns are labeled with a short prefix so that one flat row can
carry several entities side by side; ``graph.entities`` reads them back with
the same prefixes.
"""

from shuttle.app.models.activity import Activity
from shuttle.app.models.child import Child
from shuttle.app.models.parent import Parent
from shuttle.app.models.transport import Transport
from shuttle.app.models.vehicle import Vehicle


def activity_columns(prefix: str = "a_") -> list:
    return [
        Activity.id.label(f"{prefix}id"),
        Activity.name.label(f"{prefix}name"),
        Activity.address.label(f"{prefix}address"),
    ]


def parent_columns(prefix: str = "p_") -> list:
    return [
        Parent.id.label(f"{prefix}id"),
        Parent.name.label(f"{prefix}name"),
        Parent.email.label(f"{prefix}email"),
        Parent.phone.label(f"{prefix}phone"),
    ]


def child_columns(prefix: str = "c_") -> list:
    return [
        Child.id.label(f"{prefix}id"),
        Child.name.label(f"{prefix}name"),
    ]


def vehicle_columns(prefix: str = "v_") -> list:
    return [
        Vehicle.id.label(f"{prefix}id"),
        Vehicle.parent_id.label(f"{prefix}parent_id"),
        Vehicle.available_seats.label(f"{prefix}available_seats"),
    ]


def transport_columns(prefix: str = "t_") -> list:
    return [
        Transport.id.label(f"{prefix}id"),
        Transport.type.label(f"{prefix}type"),
        Transport.date_start.label(f"{prefix}date_start"),
        Transport.date_end.label(f"{prefix}date_end"),
        Transport.pickup_location.label(f"{prefix}pickup_location"),
        Transport.activity_id.label(f"{prefix}activity_id"),
        Transport.vehicle_id.label(f"{prefix}vehicle_id"),
    ]

from shuttle.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from shuttle.app.models.activity import Activity  # noqa: F401
from shuttle.app.models.parent import Parent  # noqa: F401
from shuttle.app.models.child import Child  # noqa: F401
from shuttle.app.models.associations import ChildActivity, ParentChild  # noqa: F401
from shuttle.app.models.vehicle import Vehicle  # noqa: F401
from shuttle.app.models.transport import Transport  # noqa: F401

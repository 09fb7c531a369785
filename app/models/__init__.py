# Importing the module registers tables with Base for create_all()
from .core import DeliveryZone  # noqa: F401

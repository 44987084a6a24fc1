from . import client_mapper, inventory_mapper

__all__ = ["client_mapper", "inventory_mapper"]

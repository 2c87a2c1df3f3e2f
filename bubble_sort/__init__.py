from .sim import ITEM_COUNT, MAX_VALUE, Sim, Snapshot, Step

__all__ = ["ITEM_COUNT", "MAX_VALUE", "Sim", "Snapshot", "Step"]

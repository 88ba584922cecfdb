from .grid_item_model import GridItemModel

__all__ = ['GridItemModel']

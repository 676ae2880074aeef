from mindstore.domain.catalog.aggregates.product import Product

__all__ = ["Product"]

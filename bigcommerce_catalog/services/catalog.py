"""Top-level catalog collections: products, categories, brands, channels."""

from bigcommerce_catalog.models import Brand, Category, Channel, Product
from bigcommerce_catalog.services.base import CollectionService


class ProductsService(CollectionService[Product]):
    """Products at catalog/products.

    Sub-resources can be embedded in list/get results with
    QueryParams(include=["variants", "images"]).
    """

    path = "catalog/products"
    model = Product


class CategoriesService(CollectionService[Category]):
    path = "catalog/categories"
    model = Category


class BrandsService(CollectionService[Brand]):
    path = "catalog/brands"
    model = Brand


class ChannelsService(CollectionService[Channel]):
    """Sales channels at channels."""

    path = "channels"
    model = Channel

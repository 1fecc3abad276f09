from ..schemas import ProductSchema
from ..validators import validate_product
from .crud import crud_blueprint


def create_blueprint(repo):
    return crud_blueprint("products", repo, ProductSchema(), validate_product, "Product")

from datetime import datetime
from ..schemas import OrderSchema
from ..validators import is_blank, validate_order
from .crud import crud_blueprint

DEFAULT_STATUS = "CREATED"


def stamp_new_order(order):
    """created_at is always server time; status defaults only when the client left it blank."""
    order.created_at = datetime.now()
    if is_blank(order.status):
        order.status = DEFAULT_STATUS


def create_blueprint(repo):
    return crud_blueprint(
        "orders", repo, OrderSchema(), validate_order, "Order",
        before_create=stamp_new_order,
    )

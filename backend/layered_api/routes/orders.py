"""
Layered API — Order Routes
===========================

GET/POST /api/orders, GET/PUT/DELETE /api/orders/{id}.
Request bodies carry {"id", "userId"}; responses carry the nested user.
"""

from layered_api.routes.crud import build_crud_router, orders_controller
from layered_api.schemas.order import CreateOrderRequest, OrderResponse, UpdateOrderRequest

router = build_crud_router(
    prefix="/api/orders",
    tag="Orders",
    controller_dependency=orders_controller,
    create_model=CreateOrderRequest,
    update_model=UpdateOrderRequest,
    response_model=OrderResponse,
)

from __future__ import annotations

from flask import Flask

from ..common.responses import optional_id, request_payload, respond
from ..container import Container
from ..core.enums import Role
from ..users.controller import current_user_id, role_required


def register(app: Flask, container: Container) -> None:
    svc = container.notification_service

    @app.route("/admin/transactions/<int:transaction_id>/notify", methods=["POST"], endpoint="notify_customer")
    @role_required(Role.ADMIN)
    def notify_customer(transaction_id: int):
        customer_id = optional_id(request_payload().get("customer_id"))
        if customer_id is None:
            # Default to the customer who placed the order.
            tx = container.transaction_service.get_transaction(transaction_id)
            if not tx.ok:
                return respond(tx)
            customer_id = tx.value.customer_id
        result = svc.send_completion_notification(transaction_id=transaction_id, customer_id=customer_id)
        return respond(result, key="notification_id", status=201)

    @app.route("/customer/notifications", methods=["GET"], endpoint="notifications")
    @role_required(Role.CUSTOMER)
    def notifications():
        return respond(svc.list_notifications(current_user_id()), key="notifications")

    @app.route("/customer/notifications/<int:notification_id>/read", methods=["POST"], endpoint="read_notification")
    @role_required(Role.CUSTOMER)
    def read_notification(notification_id: int):
        return respond(svc.mark_notification_read(notification_id=notification_id, recipient_id=current_user_id()))

    @app.route("/customer/notifications/<int:notification_id>", methods=["DELETE"], endpoint="delete_notification")
    @role_required(Role.CUSTOMER)
    def delete_notification(notification_id: int):
        return respond(svc.delete_notification(notification_id=notification_id, recipient_id=current_user_id()))

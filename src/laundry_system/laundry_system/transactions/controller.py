from __future__ import annotations

from flask import Flask, request

from ..common.responses import optional_id, request_payload, respond
from ..container import Container
from ..core.enums import Role
from ..users.controller import current_user_id, role_required


def register(app: Flask, container: Container) -> None:
    svc = container.transaction_service

    @app.route("/customer/transactions", methods=["GET"], endpoint="transaction_history")
    @role_required(Role.CUSTOMER)
    def transaction_history():
        return respond(svc.transaction_history(current_user_id()), key="transactions")

    @app.route("/customer/transactions", methods=["POST"], endpoint="create_transaction")
    @role_required(Role.CUSTOMER)
    def create_transaction():
        data = request_payload()
        result = svc.create_transaction(
            service_id=optional_id(data.get("service_id")),
            customer_id=current_user_id(),
            weight=data.get("weight"),
            notes=data.get("notes"),
        )
        return respond(result, key="transaction_id", status=201)

    @app.route("/admin/transactions", methods=["GET"], endpoint="admin_transactions")
    @role_required(Role.ADMIN)
    def admin_transactions():
        # ?status=Finished|Pending, anything else lists everything
        return respond(svc.all_transactions(request.args.get("status")), key="transactions")

    @app.route("/receptionist/queue", methods=["GET"], endpoint="assignment_queue")
    @role_required(Role.RECEPTIONIST)
    def assignment_queue():
        return respond(svc.assignment_queue(), key="transactions")

    @app.route("/receptionist/assign", methods=["POST"], endpoint="assign_transaction")
    @role_required(Role.RECEPTIONIST)
    def assign_transaction():
        data = request_payload()
        result = svc.assign(
            transaction_id=optional_id(data.get("transaction_id")),
            staff_id=optional_id(data.get("staff_id")),
            receptionist_id=current_user_id(),
        )
        return respond(result)

    @app.route("/staff/jobs", methods=["GET"], endpoint="staff_jobs")
    @role_required(Role.LAUNDRY_STAFF)
    def staff_jobs():
        return respond(svc.staff_job_queue(current_user_id()), key="transactions")

    @app.route("/staff/jobs/<int:transaction_id>/finish", methods=["POST"], endpoint="finish_job")
    @role_required(Role.LAUNDRY_STAFF)
    def finish_job(transaction_id: int):
        return respond(svc.finish(transaction_id))

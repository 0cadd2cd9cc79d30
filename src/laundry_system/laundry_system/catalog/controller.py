from __future__ import annotations

from flask import Flask

from ..common.responses import request_payload, respond
from ..container import Container
from ..core.enums import Role
from ..users.controller import login_required, role_required


def register(app: Flask, container: Container) -> None:
    @app.route("/services", methods=["GET"], endpoint="services")
    @login_required
    def services():
        return respond(container.catalog_service.list_services(), key="services")

    @app.route("/admin/services", methods=["POST"], endpoint="add_service")
    @role_required(Role.ADMIN)
    def add_service():
        data = request_payload()
        result = container.catalog_service.add_service(
            name=data.get("name", ""),
            description=data.get("description", ""),
            price=data.get("price"),
            duration=data.get("duration"),
        )
        return respond(result, key="service_id", status=201)

    @app.route("/admin/services/<int:service_id>", methods=["DELETE"], endpoint="delete_service")
    @role_required(Role.ADMIN)
    def delete_service(service_id: int):
        return respond(container.catalog_service.delete_service(service_id))

from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..roster.views import class_json, pending_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    def list_classes():
        classes = container.class_service.list_classes()
        selected = container.class_service.selected_class
        return jsonify(
            {
                "classes": [class_json(c) for c in classes],
                "selected_class_id": selected.id if selected else None,
            }
        )

    @app.route("/api/classes", methods=["POST"], endpoint="add_class")
    def add_class():
        data = request.get_json(silent=True) or {}
        cls = container.class_service.add_class(str(data.get("name", "")))
        return jsonify({"success": True, "class": class_json(cls)}), 201

    @app.route("/api/classes/<int:class_id>", methods=["PUT"], endpoint="edit_class")
    def edit_class(class_id: int):
        data = request.get_json(silent=True) or {}
        cls = container.class_service.edit_class(class_id, str(data.get("name", "")))
        return jsonify({"success": True, "class": class_json(cls)})

    @app.route("/api/classes/<int:class_id>/select", methods=["POST"], endpoint="select_class")
    def select_class(class_id: int):
        container.class_service.select_class(class_id)
        selected = container.class_service.selected_class
        return jsonify({"success": True, "selected_class_id": selected.id if selected else None})

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="delete_class")
    def delete_class(class_id: int):
        return pending_response(container.pending, container.class_service.propose_delete_class(class_id))

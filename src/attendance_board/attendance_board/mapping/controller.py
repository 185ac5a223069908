from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..core.exceptions import ValidationError
from ..container import Container
from .model import MAPPED_FIELDS


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/column-mapping", methods=["GET"], endpoint="api_mapping_get")
    def api_mapping_get():
        mapping = container.mapping_service.current()
        if mapping is None:
            return jsonify({"configured": False, "fields": list(MAPPED_FIELDS)}), 404
        return jsonify({"configured": True, "fields": list(MAPPED_FIELDS), "mapping": mapping.to_storage()}), 200

    @app.route("/api/settings/column-mapping", methods=["PUT"], endpoint="api_mapping_save")
    def api_mapping_save():
        try:
            data = require_json_object(request.get_json(silent=True))
            mapping = container.mapping_service.save(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "mapping": mapping.to_storage()}), 200

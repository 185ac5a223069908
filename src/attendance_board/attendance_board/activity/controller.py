from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activity", methods=["GET"], endpoint="api_activity")
    def api_activity():
        return jsonify({"entries": container.activity_log.entries()}), 200
